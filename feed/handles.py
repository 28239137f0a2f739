DEFAULT_HANDLE_DOMAIN = "bsky.social"


def normalize_handle(handle: str, domain: str = DEFAULT_HANDLE_DOMAIN) -> str:
    """
    Fully qualify a Bluesky handle.

    ``voicesignited``, ``@voicesignited``, ``voicesignited.bsky.social`` and
    ``@voicesignited.bsky.social`` all become ``voicesignited.bsky.social``.
    """
    handle = (handle or "").strip()
    if handle.startswith("@"):
        handle = handle[1:]
    if not handle or "." in handle:
        return handle
    return f"{handle}.{domain}"

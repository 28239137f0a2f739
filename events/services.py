"""
Approval workflow for submitted events.

An event moves ``pending -> approved`` at most once.  The transition is a
single conditional update on ``{id, approved: false}`` so two admins
approving the same event race at the database and exactly one wins; the
loser gets ``ApprovalNoOp``.  Rejection deletes the event.  Nothing here
retries: failures go straight back to the caller.
"""
import logging

from .exceptions import ApprovalNoOp, EventNotFound
from .store import EventStore

logger = logging.getLogger(__name__)

ACTION_APPROVE = "approve"
ACTION_REJECT = "reject"
APPROVAL_ACTIONS = (ACTION_APPROVE, ACTION_REJECT)

DEFAULT_APPROVER = "Admin"


def approve_event(event_id, admin_name=None, store=None):
    """Approve a pending event and return it."""
    store = store or EventStore()
    approver = (admin_name or "").strip() or DEFAULT_APPROVER

    updated = store.mark_approved(event_id, approver)
    if not updated:
        if not store.exists(event_id):
            logger.info("Approve no-op: event %s not found", event_id)
            raise EventNotFound()
        logger.info("Approve no-op: event %s already approved", event_id)
        raise ApprovalNoOp()

    logger.info("Event %s approved by %s", event_id, approver)
    return store.get(event_id)


def reject_event(event_id, admin_name=None, store=None):
    """Reject (delete) an event.  There is no soft-delete state."""
    store = store or EventStore()
    store.delete(event_id)
    logger.info("Event %s rejected and removed by %s", event_id, admin_name or DEFAULT_APPROVER)


def apply_action(event_id, action, admin_name=None, store=None):
    """Dispatch an approval action.  Returns the approved event, or None on reject."""
    if action == ACTION_APPROVE:
        return approve_event(event_id, admin_name, store=store)
    if action == ACTION_REJECT:
        reject_event(event_id, admin_name, store=store)
        return None
    raise ValueError(f"Unknown approval action: {action!r}")

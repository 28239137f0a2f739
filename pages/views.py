"""
Server-rendered pages.

The home page and the calendar read approved events through the same
``EventStore`` the API uses; the admin screens drive the approval
workflow in ``events.services``.  The Bluesky widget loads itself from
``/api/bluesky`` in the browser.
"""
import logging
from datetime import date

from django.contrib import messages
from django.contrib.auth.decorators import user_passes_test
from django.contrib.auth import login as django_login, logout as django_logout
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST
from rest_framework.exceptions import ValidationError

from common.exceptions import ServiceError
from common.permissions import is_admin
from events.models import Event
from events.services import APPROVAL_ACTIONS, apply_action
from events.store import EventStore

from .forms import AdminLoginForm, EventSubmissionForm
from .utils import month_grid, parse_month, shift_month

logger = logging.getLogger(__name__)

admin_required = user_passes_test(is_admin, login_url="pages:admin-login")

store = EventStore()

HOME_FEED_LIMIT = 5
HOME_UPCOMING_LIMIT = 3
EVENTS_UPCOMING_LIMIT = 5

SUBMITTED_MESSAGE = (
    "Thank you for submitting your event! It has been sent for review and will "
    "appear on the calendar once approved."
)


def home(request):
    return render(request, "pages/home.html", {
        "upcoming": store.upcoming(HOME_UPCOMING_LIMIT),
        "feed_limit": HOME_FEED_LIMIT,
    })


def events_page(request):
    if request.method == "POST":
        form = EventSubmissionForm(request.POST)
        if form.is_valid():
            event = store.create(form.cleaned_data)
            logger.info("Event %s submitted from the calendar page", event.pk)
            messages.success(request, SUBMITTED_MESSAGE)
            return redirect("pages:events")
    else:
        form = EventSubmissionForm()

    year, month = parse_month(request.GET)
    filters = {"month": month, "year": year}
    for name in ("type", "locationType"):
        if request.GET.get(name):
            filters[name] = request.GET[name]

    try:
        month_events = store.find(filters)
    except ValidationError:
        # unknown type/locationType from a hand-edited URL
        filters = {"month": month, "year": year}
        month_events = store.find(filters)

    prev_year, prev_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)

    return render(request, "pages/events.html", {
        "form": form,
        "weeks": month_grid(year, month, month_events),
        "month_label": date(year, month, 1).strftime("%B %Y"),
        "prev": {"year": prev_year, "month": prev_month},
        "next": {"year": next_year, "month": next_month},
        "filters": filters,
        "type_choices": Event.TYPE_CHOICES,
        "location_type_choices": Event.LOCATION_TYPE_CHOICES,
        "upcoming": store.upcoming(EVENTS_UPCOMING_LIMIT),
    })


def admin_login(request):
    if is_admin(request.user):
        return redirect("pages:admin-events")

    form = AdminLoginForm(request, data=request.POST or None)
    if request.method == "POST" and form.is_valid():
        user = form.get_user()
        django_login(request, user)
        logger.info("Admin %s logged in via the admin panel", user.get_username())
        next_url = request.GET.get("next")
        if not url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
            next_url = reverse("pages:admin-events")
        return redirect(next_url)
    return render(request, "pages/admin_login.html", {"form": form})


@require_POST
def admin_logout(request):
    django_logout(request)
    return redirect("pages:home")


@admin_required
def admin_events(request):
    return render(request, "pages/admin_events.html", {
        "pending": store.find({"showPending": "true"}, admin=True),
        "approved": store.find({"showApproved": "true"}, admin=True),
    })


@require_POST
@admin_required
def admin_event_action(request, pk, action):
    if action not in APPROVAL_ACTIONS:
        messages.error(request, f"Unknown action: {action}")
        return redirect("pages:admin-events")

    try:
        event = apply_action(pk, action, request.user.get_username(), store=store)
    except ServiceError as exc:
        messages.error(request, str(exc.detail))
    else:
        if event is None:
            messages.success(request, "Event rejected and removed.")
        else:
            messages.success(request, f"“{event.title}” approved.")
    return redirect("pages:admin-events")


def page_not_found(request, exception=None):
    return render(request, "404.html", status=404)

"""Calendar helpers for the events page."""
import calendar
from collections import defaultdict
from datetime import date


def parse_month(params, today=None):
    """``(year, month)`` from the query string, falling back to today's month."""
    today = today or date.today()
    try:
        month = int(params.get("month", today.month))
        year = int(params.get("year", today.year))
    except (TypeError, ValueError):
        return today.year, today.month
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        return today.year, today.month
    return year, month


def shift_month(year, month, delta):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_grid(year, month, events, firstweekday=calendar.SUNDAY):
    """
    Weeks of the month as lists of ``{"date", "in_month", "events"}`` cells.
    Weeks start on Sunday, padded with days of the neighbouring months.
    """
    by_day = defaultdict(list)
    for event in events:
        by_day[event.date].append(event)

    cal = calendar.Calendar(firstweekday=firstweekday)
    return [
        [
            {"date": day, "in_month": day.month == month, "events": by_day.get(day, [])}
            for day in week
        ]
        for week in cal.monthdatescalendar(year, month)
    ]

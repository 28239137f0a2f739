"""
django-filter FilterSet for event listings.

``month`` and ``year`` only narrow the listing when both are given; they
then select every event dated inside that calendar month.  ``type`` and
``locationType`` match the stored choices exactly.
"""
import calendar
from datetime import date

from django import forms
from django_filters import rest_framework as filters

from .models import Event


class EventFilterForm(forms.Form):
    def clean(self):
        cleaned = super().clean()
        month = cleaned.get("month")
        if month is not None and not 1 <= month <= 12:
            self.add_error("month", "Month must be between 1 and 12.")
        year = cleaned.get("year")
        if year is not None and not 1 <= year <= 9999:
            self.add_error("year", "Year must be between 1 and 9999.")
        return cleaned


class EventFilter(filters.FilterSet):
    """Filter set for the public and admin event listings."""

    month = filters.NumberFilter(method="filter_noop")
    year = filters.NumberFilter(method="filter_noop")
    type = filters.ChoiceFilter(field_name="type", choices=Event.TYPE_CHOICES)
    locationType = filters.ChoiceFilter(field_name="location_type", choices=Event.LOCATION_TYPE_CHOICES)

    class Meta:
        model = Event
        fields = []
        form = EventFilterForm

    def filter_noop(self, queryset, name, value):
        # month and year are applied together in filter_queryset
        return queryset

    def filter_queryset(self, queryset):
        queryset = super().filter_queryset(queryset)
        month = self.form.cleaned_data.get("month")
        year = self.form.cleaned_data.get("year")
        if month and year:
            month, year = int(month), int(year)
            last_day = calendar.monthrange(year, month)[1]
            queryset = queryset.filter(
                date__gte=date(year, month, 1),
                date__lte=date(year, month, last_day),
            )
        return queryset

# activities/views.py
"""
Views for the activities application.

This module defines the JSON views used by parents to browse
activities and to enroll or withdraw their children. Enrollment
mutations are traced in the action journal.
"""

from accounts.mixins import ApiView, ParentRequiredMixin
from monitoring.html_logger import journaled
from portail_famille.errors import from_form_errors
from portail_famille.http import json_response, parse_json_body

from . import services
from .enrollments import create_enrollment, withdraw_enrollment
from .forms import ActivityFilterForm, EnrollmentForm


class ActivityListView(ParentRequiredMixin, ApiView):
    """
    View for listing activities.

    Supports pagination, a date range, a tag intersection filter
    and a filter on activities with free places.
    """

    def get(self, request):
        """
        Return one page of activities.

        Parameters
        ----------
        request : HttpRequest
            The current request, filters are read from the query string.

        Returns
        -------
        JsonResponse
            ``{"activities": [...], "pagination": {...}}``
        """
        form = ActivityFilterForm(request.GET)
        if not form.is_valid():
            raise from_form_errors(form, "Invalid query parameters")
        return json_response(services.list_activities(form.cleaned_data))


class ActivityDetailView(ParentRequiredMixin, ApiView):
    """View returning a single activity with its free places."""

    def get(self, request, pk):
        return json_response(services.get_activity(pk))


class EnrollmentCreateView(ParentRequiredMixin, ApiView):
    """
    View enrolling a child of the authenticated parent in an activity.
    """

    def post(self, request):
        """
        Handle the enrollment request.

        Returns
        -------
        JsonResponse
            The created enrollment with status 201.
        """
        form = EnrollmentForm(parse_json_body(request))
        if not form.is_valid():
            raise from_form_errors(form)
        child_id = form.cleaned_data["child_id"]
        activity_id = form.cleaned_data["activity_id"]

        with journaled("ENROLL_CHILD", parent_id=request.user.pk, child_id=child_id, activity_id=activity_id):
            result = create_enrollment(request.user, child_id, activity_id)
        return json_response(result, status=201)


class EnrollmentWithdrawView(ParentRequiredMixin, ApiView):
    """
    View withdrawing a child from an activity.

    The enrollment is addressed by the (child, activity) pair.
    """

    def delete(self, request, child_id, activity_id):
        with journaled(
            "WITHDRAW_ENROLLMENT",
            parent_id=request.user.pk,
            child_id=child_id,
            activity_id=activity_id,
        ):
            result = withdraw_enrollment(request.user, child_id, activity_id)
        return json_response(result)

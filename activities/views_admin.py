# activities/views_admin.py
"""
Administration views for activities and tags.

All views require the administrator role.
"""

from accounts.mixins import AdminRequiredMixin, ApiView
from monitoring.html_logger import journaled
from portail_famille.errors import from_form_errors
from portail_famille.forms import SearchPageForm
from portail_famille.http import json_response, parse_json_body

from . import services_admin
from .forms import AdminActivityForm, AdminActivityUpdateForm


class AdminActivityListView(AdminRequiredMixin, ApiView):
    """
    ``GET`` lists activities newest first, ``POST`` creates one.
    """

    def get(self, request):
        form = SearchPageForm(request.GET)
        if not form.is_valid():
            raise from_form_errors(form, "Invalid query parameters")
        data = form.cleaned_data
        return json_response(
            services_admin.list_admin_activities(data["page"], data["limit"], data.get("search", "").strip())
        )

    def post(self, request):
        form = AdminActivityForm(parse_json_body(request))
        if not form.is_valid():
            raise from_form_errors(form)
        with journaled("CREATE_ACTIVITY", admin_id=request.user.pk, name=form.cleaned_data["name"]):
            activity = services_admin.create_activity(form.cleaned_data)
        return json_response(activity, status=201)


class AdminActivityDetailView(AdminRequiredMixin, ApiView):
    """
    ``GET``, ``PATCH`` and ``DELETE`` on a single activity.

    Updates and deletions report ``notifications_sent``.
    """

    def get(self, request, pk):
        return json_response(services_admin.get_admin_activity(pk))

    def patch(self, request, pk):
        form = AdminActivityUpdateForm(parse_json_body(request))
        if not form.is_valid():
            raise from_form_errors(form)
        with journaled("UPDATE_ACTIVITY", admin_id=request.user.pk, activity_id=pk):
            activity = services_admin.update_activity(pk, form.changes())
        return json_response(activity)

    def delete(self, request, pk):
        with journaled("DELETE_ACTIVITY", admin_id=request.user.pk, activity_id=pk):
            result = services_admin.delete_activity(pk)
        return json_response(result)


class TagListView(AdminRequiredMixin, ApiView):
    """Closed dictionary of activity tags."""

    def get(self, request):
        return json_response(services_admin.list_tags())

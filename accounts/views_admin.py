# accounts/views_admin.py
"""
Administration views for parent accounts.

All views require the administrator role.
"""

from monitoring.html_logger import journaled
from portail_famille.errors import from_form_errors
from portail_famille.forms import SearchPageForm
from portail_famille.http import json_response

from . import services
from .mixins import AdminRequiredMixin, ApiView


class ParentListView(AdminRequiredMixin, ApiView):
    """Paginated list of parents with their number of children."""

    def get(self, request):
        form = SearchPageForm(request.GET)
        if not form.is_valid():
            raise from_form_errors(form, "Invalid query parameters")
        data = form.cleaned_data
        return json_response(
            services.list_parents(data["page"], data["limit"], data.get("search", "").strip())
        )


class ParentDetailView(AdminRequiredMixin, ApiView):
    """
    ``GET`` returns a parent with its children, ``DELETE`` removes
    the account with all its data.
    """

    def get(self, request, pk):
        return json_response(services.get_parent(pk))

    def delete(self, request, pk):
        with journaled("DELETE_PARENT", admin_id=request.user.pk, parent_id=pk):
            result = services.delete_parent(pk)
        return json_response(result)

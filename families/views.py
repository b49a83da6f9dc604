# families/views.py
"""
Views for the families application.

This module defines the JSON views used by a parent to list,
create, read and update their children, and to list the
enrollments of a child. There is no deletion endpoint.
"""

from accounts.mixins import ApiView, ParentRequiredMixin
from activities.enrollments import list_child_enrollments
from monitoring.html_logger import journaled
from portail_famille.errors import from_form_errors
from portail_famille.http import json_response, parse_json_body

from . import services
from .forms import ChildForm, ChildUpdateForm


class ChildListView(ParentRequiredMixin, ApiView):
    """
    View for the children of the authenticated parent.

    ``GET`` lists them, ``POST`` creates one. The parent is always
    the authenticated user.
    """

    def get(self, request):
        """
        Return the children of the authenticated parent.

        Returns
        -------
        JsonResponse
            ``{"children": [...]}``
        """
        return json_response({"children": services.list_children(request.user)})

    def post(self, request):
        """
        Create a child owned by the authenticated parent.

        Returns
        -------
        JsonResponse
            The created child with status 201.
        """
        form = ChildForm(parse_json_body(request))
        if not form.is_valid():
            raise from_form_errors(form)
        with journaled("CREATE_CHILD", parent_id=request.user.pk):
            child = services.create_child(request.user, form.cleaned_data)
        return json_response(child.to_dict(), status=201)


class ChildDetailView(ParentRequiredMixin, ApiView):
    """
    View for a single child of the authenticated parent.

    A child of another parent answers ``CHILD_NOT_OWNED``.
    """

    def get(self, request, pk):
        return json_response(services.get_owned_child(request.user, pk).to_dict())

    def patch(self, request, pk):
        form = ChildUpdateForm(parse_json_body(request))
        if not form.is_valid():
            raise from_form_errors(form)
        with journaled("UPDATE_CHILD", parent_id=request.user.pk, child_id=pk):
            child = services.update_child(request.user, pk, form.changes())
        return json_response(child.to_dict())


class ChildEnrollmentsView(ParentRequiredMixin, ApiView):
    """View listing the enrollments of a child with ``can_withdraw``."""

    def get(self, request, pk):
        return json_response(list_child_enrollments(request.user, pk))

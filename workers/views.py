# workers/views.py
"""
Administration views for workers.

All views require the administrator role. Mutations are traced
in the action journal.
"""

from accounts.mixins import AdminRequiredMixin, ApiView
from monitoring.html_logger import journaled
from portail_famille.errors import from_form_errors
from portail_famille.forms import PageForm
from portail_famille.http import json_response, parse_json_body

from . import services
from .forms import WorkerForm


def _valid_worker_form(request) -> WorkerForm:
    form = WorkerForm(parse_json_body(request))
    if not form.is_valid():
        raise from_form_errors(form)
    return form


class WorkerListView(AdminRequiredMixin, ApiView):
    """
    ``GET`` lists workers page by page, ``POST`` creates one.
    """

    def get(self, request):
        form = PageForm(request.GET)
        if not form.is_valid():
            raise from_form_errors(form, "Invalid query parameters")
        data = services.list_workers(form.cleaned_data["page"], form.cleaned_data["limit"])
        return json_response(data)

    def post(self, request):
        form = _valid_worker_form(request)
        with journaled("CREATE_WORKER", admin_id=request.user.pk, email=form.cleaned_data["email"]):
            worker = services.create_worker(form.cleaned_data)
        return json_response(worker.to_dict(), status=201)


class WorkerDetailView(AdminRequiredMixin, ApiView):
    """
    ``GET``, ``PUT`` and ``DELETE`` on a single worker.
    """

    def get(self, request, pk):
        return json_response(services.get_worker(pk).to_dict())

    def put(self, request, pk):
        form = _valid_worker_form(request)
        with journaled("UPDATE_WORKER", admin_id=request.user.pk, worker_id=pk):
            worker = services.update_worker(pk, form.cleaned_data)
        return json_response(worker.to_dict())

    def delete(self, request, pk):
        with journaled("DELETE_WORKER", admin_id=request.user.pk, worker_id=pk):
            result = services.delete_worker(pk)
        return json_response(result)

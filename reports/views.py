# reports/views.py
"""
Views for the reports application.
"""

from django.http import HttpResponse

from accounts.mixins import ApiView, ParentRequiredMixin
from monitoring.html_logger import journaled
from portail_famille.errors import from_form_errors

from .forms import WeeklyReportForm
from .renderers import get_report_renderer
from .services import weekly_cost_report


class WeeklyCostReportView(ParentRequiredMixin, ApiView):
    """
    Weekly cost report of the authenticated parent.

    ``?week=YYYY-MM-DD`` selects the week by its Monday and
    ``?format=pdf|json`` the document type.
    """

    def get(self, request):
        """
        Build and render the report.

        Returns
        -------
        HttpResponse
            The PDF as an attachment, or the JSON report.
        """
        form = WeeklyReportForm(request.GET)
        if not form.is_valid():
            raise from_form_errors(form, "Invalid query parameters")
        week = form.cleaned_data["week"]
        renderer = get_report_renderer(form.cleaned_data.get("format") or None)

        with journaled("REPORT_WEEKLY_COSTS", parent_id=request.user.pk, week_start=week.isoformat()):
            report = weekly_cost_report(request.user, week)
            rendered = renderer.render(report)

        response = HttpResponse(rendered.content, content_type=rendered.content_type)
        if rendered.filename:
            response["Content-Disposition"] = f'attachment; filename="{rendered.filename}"'
        response["Cache-Control"] = "no-store"
        return response

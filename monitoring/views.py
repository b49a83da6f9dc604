# monitoring/views.py
"""
Views for the monitoring application.

This module provides an administrative view for inspecting
the action journal directly through the browser.
"""

from django.contrib.admin.views.decorators import staff_member_required
from django.http import HttpResponse

from .html_logger import FOOTER, HEADER, log_file


@staff_member_required
def logs_view(request):
    """
    Display the action journal as HTML content.

    Restricted to staff members only. Reads the journal file written
    by :mod:`monitoring.html_logger` and returns it as a page.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.

    Returns
    -------
    HttpResponse
        The journal page, or a placeholder page if no entry has been
        written yet.
    """
    path = log_file()

    # Read the log file if available, otherwise fallback with a placeholder
    if path.exists():
        html = path.read_text(encoding="utf-8")
    else:
        html = HEADER + "<p>Aucun log pour le moment.</p>"

    return HttpResponse(html + FOOTER, content_type="text/html; charset=utf-8")

# reports/renderers.py
"""
Renderers for the weekly cost report.

A renderer turns the report dictionary built by
:func:`reports.services.weekly_cost_report` into a document. The
PDF renderer draws a table with ReportLab, the JSON renderer returns
the report as is. :func:`get_report_renderer` selects one from the
requested format or from ``settings.REPORT_BACKEND``.
"""

from dataclasses import dataclass
from io import BytesIO
from typing import Optional, Protocol
import json
import logging

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from portail_famille.http import ApiJSONEncoder

logger = logging.getLogger(__name__)

FONT_SIZE = 10
#: Space kept between two columns, in millimetres
COLUMN_GAP = 2
ELLIPSIS = "…"


def fit_text(text: str, width: Optional[float], font_name: str, font_size: float) -> str:
    """
    Shorten ``text`` with an ellipsis so that it fits in ``width`` points.

    ``width`` None means no limit.
    """
    if width is None or stringWidth(text, font_name, font_size) <= width:
        return text
    while text and stringWidth(text + ELLIPSIS, font_name, font_size) > width:
        text = text[:-1]
    return text.rstrip() + ELLIPSIS


@dataclass
class RenderedReport:
    """
    A rendered document.

    Attributes
    ----------
    content : bytes
        Document body.
    content_type : str
        MIME type of the body.
    filename : str, optional
        Download name, None for inline JSON.
    """

    content: bytes
    content_type: str
    filename: Optional[str] = None


class ReportRenderer(Protocol):
    """
    Protocol for report renderers.
    """

    def render(self, report: dict) -> RenderedReport:
        """
        Render a weekly cost report.

        Parameters
        ----------
        report : dict
            ``{rows, total, week_start, week_end}``

        Returns
        -------
        RenderedReport
            The document.
        """
        ...


@dataclass
class JsonReportRenderer:
    """Renderer returning the report as a JSON document."""

    def render(self, report: dict) -> RenderedReport:
        content = json.dumps(report, cls=ApiJSONEncoder).encode("utf-8")
        return RenderedReport(content=content, content_type="application/json")


@dataclass
class PdfReportRenderer:
    """
    Renderer drawing the report as an A4 PDF table.

    The last line is the total, also when the week has no row.

    Attributes
    ----------
    title : str
        Heading of the document.
    """

    title: str = "Coûts des activités"

    #: Column headings and x offsets in millimetres
    columns = (
        ("Prénom", 0),
        ("Nom", 30),
        ("Activité", 60),
        ("Date", 115),
        ("Heure", 140),
        ("Coût (€)", 157),
    )

    def render(self, report: dict) -> RenderedReport:
        """
        Render the report with ReportLab.

        Returns
        -------
        RenderedReport
            ``application/pdf`` document named
            ``activity-costs-week-<week_start>.pdf``.
        """
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=A4)
        width, height = A4
        margin = 20 * mm
        y = height - margin

        # --- Header section ---
        c.setFont("Helvetica-Bold", 16)
        c.drawString(margin, y, self.title)
        y -= 10 * mm
        c.setFont("Helvetica", 11)
        c.drawString(margin, y, f"Semaine du {report['week_start']} au {report['week_end']}")
        y -= 12 * mm

        y = self._draw_header(c, margin, y)

        # --- Rows ---
        for row in report["rows"]:
            if y < 30 * mm:
                c.showPage()
                y = self._draw_header(c, margin, height - margin)
            y = self._draw_row(
                c,
                margin,
                y,
                [
                    row["child_first_name"],
                    row["child_last_name"],
                    row["activity_name"],
                    row["activity_date"],
                    row["activity_time"],
                    f"{row['cost']:.2f}",
                ],
            )

        # --- Total ---
        y -= 2 * mm
        cells = ["Total", "", "", "", "", f"{report['total']:.2f}"]
        self._draw_row(c, margin, y, cells, bold=True)

        c.showPage()
        c.save()
        logger.info("Weekly cost report rendered (%s rows)", len(report["rows"]))
        return RenderedReport(
            content=buffer.getvalue(),
            content_type="application/pdf",
            filename=f"activity-costs-week-{report['week_start']}.pdf",
        )

    def _draw_header(self, c, margin, y):
        return self._draw_row(c, margin, y, [label for label, _ in self.columns], bold=True)

    def _draw_row(self, c, margin, y, cells, bold=False):
        font = "Helvetica-Bold" if bold else "Helvetica"
        c.setFont(font, FONT_SIZE)
        for (_, offset), width, cell in zip(self.columns, self._column_widths(), cells):
            c.drawString(margin + offset * mm, y, fit_text(str(cell), width, font, FONT_SIZE))
        return y - 7 * mm

    def _column_widths(self):
        # The last column runs to the page edge.
        offsets = [offset for _, offset in self.columns]
        widths = [(end - start - COLUMN_GAP) * mm for start, end in zip(offsets, offsets[1:])]
        return widths + [None]


def get_report_renderer(fmt: Optional[str] = None) -> ReportRenderer:
    """
    Factory function to select the report renderer.

    Parameters
    ----------
    fmt : str, optional
        ``pdf`` or ``json``. Defaults to ``settings.REPORT_BACKEND``.

    Returns
    -------
    ReportRenderer
        The renderer instance.
    """
    from django.conf import settings

    backend = fmt or getattr(settings, "REPORT_BACKEND", "pdf")
    if backend == "json":
        return JsonReportRenderer()
    return PdfReportRenderer()

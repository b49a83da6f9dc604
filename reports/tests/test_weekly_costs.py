"""
Tests of the weekly cost report.
"""

from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal
import re
from unittest.mock import patch

from django.test import SimpleTestCase, override_settings
from django.urls import reverse
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

from activities.models import Enrollment
from portail_famille.testing import ApiTestCase, make_activity, make_child, make_user, make_worker
from reports.forms import current_monday
from reports.renderers import ELLIPSIS, JsonReportRenderer, PdfReportRenderer, fit_text, get_report_renderer
from reports.services import weekly_cost_report

# Monday
WEEK = date(2030, 5, 6)


def at(day, hour, minute=0):
    return datetime(2030, 5, day, hour, minute, tzinfo=dt_timezone.utc)


class WeeklyCostReportServiceTests(ApiTestCase):
    def setUp(self):
        """
        Enroll two children of a parent in activities around one week.
        """
        self.parent = make_user("parent@example.org")
        self.bob = make_child(self.parent, first_name="Bob", last_name="Martin")
        self.lea = make_child(self.parent, first_name="Lea", last_name="Arnaud")
        worker = make_worker()

        judo = make_activity(worker, name="Judo", start_datetime=at(8, 10), cost=Decimal("12.50"))
        late = make_activity(worker, name="Veillée", start_datetime=at(12, 23, 30), cost=Decimal("7.00"))
        before = make_activity(worker, name="Avant", start_datetime=at(5, 23, 59), cost=Decimal("99.00"))
        after = make_activity(worker, name="Après", start_datetime=at(13, 0), cost=Decimal("99.00"))
        for activity in (judo, late, before, after):
            Enrollment.objects.create(child=self.bob, activity=activity)
        Enrollment.objects.create(child=self.lea, activity=judo)

        # Another family is never reported
        other = make_child(make_user("other@example.org"))
        Enrollment.objects.create(child=other, activity=judo)

    def test_rows_inside_the_week(self):
        report = weekly_cost_report(self.parent, WEEK)
        self.assertEqual(report["week_start"], "2030-05-06")
        self.assertEqual(report["week_end"], "2030-05-12")
        self.assertEqual(
            [(r["activity_name"], r["child_last_name"]) for r in report["rows"]],
            [("Judo", "Arnaud"), ("Judo", "Martin"), ("Veillée", "Martin")],
        )
        self.assertEqual(report["rows"][2]["activity_date"], "2030-05-12")
        self.assertEqual(report["rows"][2]["activity_time"], "23:30")
        self.assertEqual(report["total"], Decimal("32.00"))

    def test_empty_week(self):
        report = weekly_cost_report(self.parent, date(2030, 6, 3))
        self.assertEqual(report["rows"], [])
        self.assertEqual(report["total"], Decimal("0"))


class WeeklyCostReportViewTests(ApiTestCase):
    def setUp(self):
        self.parent = make_user("parent@example.org")
        child = make_child(self.parent)
        Enrollment.objects.create(child=child, activity=make_activity(name="Judo", start_datetime=at(8, 10)))
        self.client.login(username="parent@example.org", password="secret-pass")
        self.url = reverse("reports:costs")

    def test_json(self):
        response = self.client.get(self.url, {"week": "2030-05-06", "format": "json"})
        self.assertEqual(response.status_code, 200, response.content)
        self.assertEqual(response["Content-Type"], "application/json")
        body = response.json()
        self.assertEqual(body["total"], 10.0)
        self.assertEqual(body["rows"][0]["activity_name"], "Judo")

    def test_pdf(self):
        response = self.client.get(self.url, {"week": "2030-05-06", "format": "pdf"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "application/pdf")
        self.assertEqual(
            response["Content-Disposition"], 'attachment; filename="activity-costs-week-2030-05-06.pdf"'
        )
        self.assertEqual(response["Cache-Control"], "no-store")
        self.assertTrue(response.content.startswith(b"%PDF"))

    def test_week_must_be_monday(self):
        response = self.client.get(self.url, {"week": "2030-05-07"})
        self.assertError(response, "VALIDATION_ERROR", 400)
        [issue] = response.json()["error"]["details"]["issues"]
        self.assertEqual(issue["code"], "not_monday")

    def test_unknown_format(self):
        self.assertError(self.client.get(self.url, {"format": "xlsx"}), "VALIDATION_ERROR", 400)

    @override_settings(REPORT_BACKEND="json")
    def test_default_format_follows_settings(self):
        response = self.client.get(self.url, {"week": "2030-05-06"})
        self.assertEqual(response["Content-Type"], "application/json")

    def test_admin_is_forbidden(self):
        make_user("admin@example.org", role="admin")
        self.client.login(username="admin@example.org", password="secret-pass")
        self.assertError(self.client.get(self.url), "AUTH_UNAUTHORIZED", 403)


class RendererTests(SimpleTestCase):
    report = {"rows": [], "total": Decimal("0"), "week_start": "2030-05-06", "week_end": "2030-05-12"}

    def test_factory(self):
        self.assertIsInstance(get_report_renderer("json"), JsonReportRenderer)
        self.assertIsInstance(get_report_renderer("pdf"), PdfReportRenderer)

    def test_empty_pdf_still_renders(self):
        rendered = PdfReportRenderer().render(self.report)
        self.assertEqual(rendered.content_type, "application/pdf")
        self.assertTrue(rendered.content.startswith(b"%PDF"))

    def test_header_repeated_on_each_page(self):
        row = {
            "child_first_name": "Bob",
            "child_last_name": "Martin",
            "activity_name": "Judo",
            "activity_date": "2030-05-08",
            "activity_time": "10:00",
            "cost": Decimal("10.00"),
        }
        report = dict(self.report, rows=[row] * 80, total=Decimal("800.00"))
        with patch.object(
            PdfReportRenderer, "_draw_header", autospec=True, side_effect=PdfReportRenderer._draw_header
        ) as draw_header:
            rendered = PdfReportRenderer().render(report)
        pages = len(re.findall(rb"/Type /Page\b", rendered.content))
        self.assertGreaterEqual(pages, 2)
        self.assertEqual(draw_header.call_count, pages)

    def test_long_text_is_ellipsized(self):
        width = 53 * mm
        name = "Stage multisport " * 10
        fitted = fit_text(name, width, "Helvetica", 10)
        self.assertTrue(fitted.endswith(ELLIPSIS))
        self.assertTrue(name.startswith(fitted[:-1]))
        self.assertLessEqual(stringWidth(fitted, "Helvetica", 10), width)

    def test_short_text_is_kept(self):
        self.assertEqual(fit_text("Judo", 53 * mm, "Helvetica", 10), "Judo")
        self.assertEqual(fit_text("Judo " * 50, None, "Helvetica", 10), "Judo " * 50)

    def test_current_monday(self):
        self.assertEqual(current_monday(date(2030, 5, 9)), WEEK)
        self.assertEqual(current_monday(WEEK), WEEK)

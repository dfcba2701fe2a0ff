from datetime import date
from types import SimpleNamespace

from poolroute.services.report_html import (
    entries_label,
    format_salt,
    render_chemical_usage_report,
    render_weekly_report,
    services_label,
)
from poolroute.services.reports import (
    build_chemical_usage_report,
    build_weekly_report,
    clamp_offset,
)

from conftest import TEST_NOW


def customer(public_id, service_day, sort_order=0, full_name=None):
    return SimpleNamespace(
        public_id=public_id,
        service_day=service_day,
        sort_order=sort_order,
        full_name=full_name or public_id.title(),
        address=f"{public_id} lane",
    )


def log(customer_id, service_date, **fields):
    values = {
        "ph": "good",
        "chlorine": "low",
        "stabilizer": "high",
        "salt": None,
        "notes": None,
    }
    values.update(fields)
    return SimpleNamespace(customer_id=customer_id, service_date=service_date, **values)


def usage(customer_id, created_date, notes=None):
    return SimpleNamespace(
        customer_id=customer_id,
        created_date=created_date,
        chemical_type="Muriatic Acid",
        quantity="1 qt",
        notes=notes,
    )


def test_clamp_offset_never_looks_forward():
    assert clamp_offset(3) == 0
    assert clamp_offset(0) == 0
    assert clamp_offset(-2) == -2


def test_weekly_report_sections_follow_roster_order():
    customers = [
        customer("second", "Monday", sort_order=1),
        customer("first", "Monday", sort_order=0),
        customer("skipped", "Monday", sort_order=2),
        customer("tue", "Tuesday"),
    ]
    logs = [
        log("second", "2024-03-04", notes="newest"),
        log("second", "2024-03-04", notes="older"),
        log("first", "2024-03-04"),
        log("tue", "2024-02-27"),
    ]

    report = build_weekly_report(customers, logs, TEST_NOW)

    assert report.window.start == date(2024, 3, 4)
    assert [s.day for s in report.sections] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    monday = report.sections[0]
    assert [r.customer.public_id for r in monday.rows] == ["first", "second"]
    assert monday.rows[1].log.notes == "newest"
    assert monday.count == 2
    assert report.sections[1].count == 0
    assert report.total_serviced == 2


def test_weekly_report_previous_week_and_future_clamp():
    customers = [customer("tue", "Tuesday")]
    logs = [log("tue", "2024-02-27")]

    assert build_weekly_report(customers, logs, TEST_NOW, week_offset=-1).total_serviced == 1
    future = build_weekly_report(customers, logs, TEST_NOW, week_offset=2)
    assert future.window.start == date(2024, 3, 4)
    assert future.total_serviced == 0


def test_chemical_usage_report_month_window():
    customers = [customer("a", "Monday", full_name="Alice")]
    records = [usage("a", "2024-04-01"), usage("a", "2024-03-05")]

    march = build_chemical_usage_report(customers, records, TEST_NOW)

    assert [r.created_date for r in march.sections[0].records] == ["2024-03-05"]
    assert march.sections[0].customer_address == "a lane"
    assert march.total_entries == 1

    february = build_chemical_usage_report(customers, records, TEST_NOW, month_offset=-1)
    assert february.sections == []


def test_labels_and_salt_formatting():
    assert services_label(1) == "1 service"
    assert services_label(3) == "3 services"
    assert entries_label(1) == "1 entry"
    assert entries_label(0) == "0 entries"
    assert format_salt(3200.0) == "3200 PPM"
    assert format_salt(None) == "-"


def test_weekly_report_html_escapes_record_text():
    customers = [customer("a", "Monday", full_name="<script>alert(1)</script>")]
    logs = [log("a", "2024-03-04", notes="Filter & pump <ok>", salt=3400)]

    page = render_weekly_report(build_weekly_report(customers, logs, TEST_NOW), TEST_NOW)

    assert "<script>alert(1)</script>" not in page
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in page
    assert "Filter &amp; pump &lt;ok&gt;" in page
    assert 'class="level-low">LOW<' in page
    assert "3400 PPM" in page
    assert "1 service" in page
    assert "No services recorded for this day" in page
    assert "Mar 04 to Mar 10, 2024" in page


def test_chemical_usage_html_lists_customer_sections():
    customers = [customer("a", "Monday", full_name="Alice")]
    records = [usage("a", "2024-03-05", notes="line one\nline two"), usage("gone", "2024-03-01")]

    page = render_chemical_usage_report(
        build_chemical_usage_report(customers, records, TEST_NOW), TEST_NOW
    )

    assert "Chemical Usage Report - March 2024" in page
    assert "Alice" in page
    assert "Unknown Customer" in page
    assert "1 entry" in page
    assert "Mar 05, 2024" in page
    assert "line one<br>line two" in page


def test_empty_chemical_usage_html():
    page = render_chemical_usage_report(build_chemical_usage_report([], [], TEST_NOW), TEST_NOW)
    assert "No chemical usage recorded for this month" in page

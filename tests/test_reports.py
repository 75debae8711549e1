import io
from datetime import datetime
import pandas as pd
import pytest


def test_report_catalogue(admin_client):
    slugs = [r["slug"] for r in admin_client.get("/reports").get_json()]
    assert slugs == ["enrollment", "medical", "rooms", "materials", "practice", "weekly"]


def test_enrollment_report_has_rollup_sheet(admin_client, faculty, make_student):
    make_student(full_name="Ada", faculty_id=faculty["id"], year=1, gender="female")
    make_student(full_name="Ben", faculty_id=faculty["id"], year=1, gender="male")

    response = admin_client.get("/reports/enrollment")

    assert response.status_code == 200
    assert response.mimetype.endswith("spreadsheetml.sheet")

    sheets = pd.read_excel(io.BytesIO(response.data), sheet_name=None)
    assert list(sheets) == ["Students", "By Faculty & Year"]
    assert sheets["Students"]["Full Name"].tolist() == ["Ada", "Ben"]

    rollup = sheets["By Faculty & Year"]
    assert rollup.loc[0, "Faculty"] == "Faculty of Physics"
    assert rollup.loc[0, "Total"] == 2
    assert rollup.loc[0, "Female"] == 1


def test_reports_build_with_empty_tables(admin_client):
    for slug in ("medical", "rooms", "materials", "practice", "weekly"):
        response = admin_client.get(f"/reports/{slug}?format=xlsx")
        assert response.status_code == 200, slug


def test_unknown_report_and_format(admin_client):
    assert admin_client.get("/reports/payroll").status_code == 404
    assert admin_client.get("/reports/rooms?format=docx").status_code == 400


def test_pdf_export_renders_tables(app):
    try:
        import weasyprint  # noqa: F401
    except (ImportError, OSError):
        pytest.skip("WeasyPrint or its system libraries are not available")

    from campus_admin.reports.export import to_pdf

    sheets = {"Rooms": pd.DataFrame([{"Room": "A1", "Capacity": 40}])}
    with app.app_context():
        pdf = to_pdf("Rooms", "Lecture rooms", sheets, datetime(2024, 5, 2, 9, 0))

    assert pdf.getvalue().startswith(b"%PDF")

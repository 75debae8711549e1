from zipfile import BadZipFile
import pandas as pd
from email_validator import validate_email, EmailNotValidError
from flask import abort
from campus_admin.extensions import db
from campus_admin.models import Student, Faculty
from campus_admin.models.academic import GENDERS

REQUIRED_COLUMNS = {"student_id", "full_name", "gender"}


def _cell(row, name):
    value = row.get(name)
    if value is None or pd.isna(value):
        return None
    return str(value).strip() or None


def _read_sheet(filepath):
    try:
        if filepath.lower().endswith(".csv"):
            return pd.read_csv(filepath, dtype=str)
        return pd.read_excel(filepath, engine="openpyxl", dtype=str)
    except (pd.errors.EmptyDataError, pd.errors.ParserError,
            UnicodeDecodeError, BadZipFile, ValueError) as e:
        abort(400, description=f"Could not read file: {str(e)}")


def _parse_year(value):
    """Whole number >= 1, or None when the value is anything else."""
    try:
        year = int(value)
    except (ValueError, OverflowError):
        return None
    return year if year >= 1 else None


def import_students(filepath):
    """
    Bulk-create students from a CSV/XLSX sheet.

    Rows are validated one by one; bad rows are reported and skipped,
    good rows are committed together at the end. A file pandas cannot
    read at all is rejected with 400.
    """
    errors = []
    success_count = 0

    df = _read_sheet(filepath)

    df.columns = df.columns.str.strip().str.lower().str.replace(" ", "_")

    missing_cols = REQUIRED_COLUMNS - set(df.columns)
    if missing_cols:
        errors.append(f"Missing required columns: {', '.join(sorted(missing_cols))}")
        return errors, success_count

    faculties = {
        faculty.faculty_name.lower(): faculty
        for faculty in db.session.scalars(db.select(Faculty)).all()
    }
    existing_ids = set(db.session.scalars(db.select(Student.student_id)).all())

    for index, row in df.iterrows():
        line = index + 2  # header is line 1
        student_id = _cell(row, "student_id")
        full_name = _cell(row, "full_name")
        gender = (_cell(row, "gender") or "").lower()

        if not student_id or not full_name:
            errors.append(f"Row {line}: student_id and full_name are required")
            continue
        if student_id in existing_ids:
            errors.append(f"Row {line}: student ID {student_id} already exists")
            continue
        if gender not in GENDERS:
            errors.append(f"Row {line}: invalid gender '{gender}'")
            continue

        raw_year = _cell(row, "year")
        year = None
        if raw_year is not None:
            year = _parse_year(raw_year)
            if year is None:
                errors.append(f"Row {line}: invalid year '{raw_year}'")
                continue

        contact_email = _cell(row, "contact_email")
        if contact_email is not None:
            try:
                contact_email = validate_email(contact_email, check_deliverability=False).normalized
            except EmailNotValidError as e:
                errors.append(f"Row {line}: invalid email: {str(e)}")
                continue

        student = Student(
            student_id=student_id,
            full_name=full_name,
            gender=gender,
            year=year,
            program=_cell(row, "program"),
            faculty=_cell(row, "faculty"),
            contact_phone=_cell(row, "contact_phone"),
            contact_email=contact_email,
        )

        faculty = faculties.get((student.faculty or "").lower())
        if faculty is not None:
            student.faculty_id = faculty.id
            student.college_id = faculty.college_id

        db.session.add(student)
        existing_ids.add(student_id)
        success_count += 1

    db.session.commit()

    return errors, success_count

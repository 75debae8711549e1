"""
Report definitions for the reports view.

Each builder returns an ordered mapping of sheet name -> DataFrame; the
export functions turn that into an XLSX workbook or a PDF.
"""
from datetime import datetime, timedelta
import pandas as pd
from campus_admin.extensions import db
from campus_admin.models import (
    Student, MedicalRecord, LectureRoom, Material, ExternalPracticeSession,
    StudentIncident, Announcement, ChatbotMessage
)
from campus_admin.utils.queries import college_tree
from campus_admin.utils.rollup import STAT_FIELDS


def _frame(rows, columns):
    return pd.DataFrame(rows, columns=columns)


def _all(model, *order_by):
    return db.session.scalars(db.select(model).order_by(*order_by)).all()


def enrollment_report():
    students = _all(Student, Student.full_name)
    student_rows = [
        {
            "Student ID": s.student_id,
            "Full Name": s.full_name,
            "College": s.college.college_name if s.college else "",
            "Faculty": s.faculty_label or "",
            "Program": s.program or "",
            "Year": s.year,
            "Gender": s.gender,
            "Incident": s.incident_type,
        }
        for s in students
    ]

    stat_columns = [name.title() for name in STAT_FIELDS]
    rollup_rows = []
    for college in college_tree():
        for faculty in college["faculties"]:
            for year in faculty["years"]:
                row = {
                    "College": college["college_name"],
                    "Faculty": faculty["faculty_name"],
                    "Year": year["year"],
                }
                row.update({name.title(): year["stats"][name] for name in STAT_FIELDS})
                rollup_rows.append(row)

    return {
        "Students": _frame(student_rows, [
            "Student ID", "Full Name", "College", "Faculty",
            "Program", "Year", "Gender", "Incident"
        ]),
        "By Faculty & Year": _frame(rollup_rows, ["College", "Faculty", "Year"] + stat_columns),
    }


def medical_report():
    records = _all(MedicalRecord, MedicalRecord.check_in_date.desc())
    df = _frame([
        {
            "Student": r.student.full_name,
            "Student ID": r.student.student_id,
            "Illness": r.illness_description,
            "Treatment": r.treatment_type,
            "Status": r.status,
            "Checked In": r.check_in_date,
            "Checked Out": r.check_out_date,
        }
        for r in records
    ], ["Student", "Student ID", "Illness", "Treatment", "Status", "Checked In", "Checked Out"])

    summary = (
        df.groupby(["Status", "Treatment"]).size().reset_index(name="Cases")
        if not df.empty else _frame([], ["Status", "Treatment", "Cases"])
    )

    return {"Medical Records": df, "Summary": summary}


def rooms_report():
    rooms = _all(LectureRoom, LectureRoom.room_name)
    df = _frame([
        {
            "Room": r.room_name,
            "Location": r.location,
            "Capacity": r.capacity,
            "Equipment": r.equipment or "",
            "Status": r.status,
        }
        for r in rooms
    ], ["Room", "Location", "Capacity", "Equipment", "Status"])

    summary = _frame([
        {
            "Total Rooms": len(df),
            "Available": int((df["Status"] == "available").sum()),
            "Occupied": int((df["Status"] == "occupied").sum()),
            "Total Capacity": int(df["Capacity"].sum()),
        }
    ], ["Total Rooms", "Available", "Occupied", "Total Capacity"])

    return {"Lecture Rooms": df, "Utilization": summary}


def materials_report():
    materials = _all(Material, Material.material_name)
    df = _frame([
        {
            "Material": m.material_name,
            "Category": m.category,
            "Quantity": m.quantity,
            "Location": m.location,
            "Status": m.status,
        }
        for m in materials
    ], ["Material", "Category", "Quantity", "Location", "Status"])

    by_category = (
        df.groupby("Category")["Quantity"].sum().reset_index()
        if not df.empty else _frame([], ["Category", "Quantity"])
    )

    return {"Inventory": df, "By Category": by_category}


def practice_report():
    sessions = _all(ExternalPracticeSession, ExternalPracticeSession.date)
    df = _frame([
        {
            "Session": s.session_name,
            "Location": s.location,
            "Date": s.date,
            "Start": s.start_time,
            "End": s.end_time,
            "Students": len(s.students_attending or []),
            "Transport": s.transport_details or "",
            "Status": s.status,
        }
        for s in sessions
    ], ["Session", "Location", "Date", "Start", "End", "Students", "Transport", "Status"])

    return {"Practice Sessions": df}


def weekly_activity_report(now=None):
    since = (now or datetime.utcnow()) - timedelta(days=7)

    sections = [
        ("New students", Student),
        ("Incidents", StudentIncident),
        ("Medical check-ins", MedicalRecord),
        ("Announcements", Announcement),
        ("Messages received", ChatbotMessage),
    ]
    rows = [
        {
            "Activity": label,
            "Count": db.session.scalar(
                db.select(db.func.count()).select_from(model).where(model.created_at >= since)
            ),
        }
        for label, model in sections
    ]

    return {"Last 7 Days": _frame(rows, ["Activity", "Count"])}


REPORTS = {
    "enrollment": (
        "Student Enrollment Report",
        "Complete list of enrolled students by faculty and program",
        enrollment_report,
    ),
    "medical": (
        "Medical Summary Report",
        "Active medical cases and treatment statistics",
        medical_report,
    ),
    "rooms": (
        "Room Utilization Report",
        "Lecture room usage and availability statistics",
        rooms_report,
    ),
    "materials": (
        "Materials Inventory Report",
        "Stock levels and material distribution history",
        materials_report,
    ),
    "practice": (
        "External Practice Report",
        "Upcoming and completed field practice sessions",
        practice_report,
    ),
    "weekly": (
        "Weekly Activity Report",
        "Comprehensive weekly summary of all activities",
        weekly_activity_report,
    ),
}

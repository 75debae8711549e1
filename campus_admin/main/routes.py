from flask import jsonify
from campus_admin.extensions import db
from campus_admin.models import (
    Student, Staff, College, LectureRoom, MedicalRecord,
    Material, ExternalPracticeSession, ChatbotMessage
)
from campus_admin.utils.decorators import login_required
from campus_admin.utils.rollup import count_by, GENDER_VALUES
from . import main_bp


def _count(model, **filters):
    query = db.select(db.func.count()).select_from(model)
    for name, value in filters.items():
        query = query.where(getattr(model, name) == value)
    return db.session.scalar(query)


def build_summary():
    """Headline figures for the dashboard, recomputed from the current tables."""
    students = db.session.scalars(db.select(Student)).all()

    return {
        "totalStudents": len(students),
        "totalStaff": _count(Staff),
        "totalColleges": _count(College),
        "availableRooms": _count(LectureRoom, status="available"),
        "activePatients": _count(MedicalRecord, status="active"),
        "lowStockItems": _count(Material, status="low_stock"),
        "upcomingPractice": _count(ExternalPracticeSession, status="planned"),
        "pendingMessages": _count(ChatbotMessage, status="pending"),
        "studentsByGender": count_by(students, "gender", known=GENDER_VALUES),
        "studentsByFaculty": count_by(students, lambda s: s.faculty_label or "Unassigned"),
    }


@main_bp.route("/summary")
@login_required
def summary():
    return jsonify(build_summary())

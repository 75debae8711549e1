from campus_admin.extensions import db
from campus_admin.models import College, Faculty, Student
from campus_admin.utils.rollup import aggregate, rollup_colleges, StudentRecord


def load_student_records():
    """Only the columns the roll-up reads, as immutable records."""
    rows = db.session.execute(
        db.select(
            Student.faculty_id,
            Student.year,
            Student.gender,
            Student.incident_type
        )
    ).all()

    return [StudentRecord.from_row(row) for row in rows]


def faculty_year_stats():
    return aggregate(load_student_records())


def college_tree():
    colleges = db.session.scalars(
        db.select(College).order_by(College.college_name)
    ).all()
    faculties = db.session.scalars(
        db.select(Faculty).order_by(Faculty.faculty_name)
    ).all()

    return rollup_colleges(colleges, faculties, faculty_year_stats())

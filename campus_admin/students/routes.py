import os
from flask import current_app, jsonify, request, abort
from werkzeug.utils import secure_filename
from campus_admin.extensions import db
from campus_admin.models import Student, Faculty
from campus_admin.models.academic import GENDERS, INCIDENT_TYPES
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.files import allowed_file
from campus_admin.utils.filters import StudentFilter
from campus_admin.utils.payload import (
    get_payload, clean_text, clean_choice, clean_int, clean_email
)
from .importer import import_students
from . import students_bp

EDITABLE_TEXT = ("full_name", "faculty", "program", "contact_phone", "photo_url")


def _apply_faculty(student, faculty_id):
    """Point the student at a faculty and keep college_id consistent with it."""
    if faculty_id is None:
        student.faculty_id = None
        return
    faculty = db.get_or_404(Faculty, faculty_id, description="Faculty not found")
    student.faculty_id = faculty.id
    student.college_id = faculty.college_id


@students_bp.route("", methods=["GET"])
@login_required
def list_students():
    students = db.session.scalars(
        db.select(Student).order_by(Student.full_name)
    ).all()

    students = StudentFilter.from_args(request.args).apply(students)

    return jsonify([student.to_dict() for student in students])


@students_bp.route("/<int:student_pk>", methods=["GET"])
@login_required
def get_student(student_pk):
    student = db.get_or_404(Student, student_pk, description="Student not found")
    return jsonify(student.to_dict())


@students_bp.route("", methods=["POST"])
@admin_required
def create_student():
    data = get_payload()

    student_id = clean_text(data, "student_id", required=True)
    if Student.query.filter_by(student_id=student_id).first():
        abort(409, description=f"Student ID {student_id} already exists")

    student = Student(
        student_id=student_id,
        full_name=clean_text(data, "full_name", required=True),
        faculty=clean_text(data, "faculty"),
        program=clean_text(data, "program"),
        gender=clean_choice(data, "gender", GENDERS),
        year=clean_int(data, "year", minimum=1),
        incident_type=clean_choice(data, "incident_type", ("none",) + INCIDENT_TYPES, default="none"),
        contact_phone=clean_text(data, "contact_phone"),
        contact_email=clean_email(data, "contact_email"),
        photo_url=clean_text(data, "photo_url"),
    )
    _apply_faculty(student, clean_int(data, "faculty_id"))

    db.session.add(student)
    db.session.commit()

    current_app.logger.info(f"Student created: {student.student_id}")
    return jsonify(student.to_dict()), 201


@students_bp.route("/<int:student_pk>", methods=["PUT", "PATCH"])
@admin_required
def update_student(student_pk):
    student = db.get_or_404(Student, student_pk, description="Student not found")
    data = get_payload()

    for name in EDITABLE_TEXT:
        if name in data:
            setattr(student, name, clean_text(data, name, required=(name == "full_name")))

    if "gender" in data:
        student.gender = clean_choice(data, "gender", GENDERS)
    if "year" in data:
        student.year = clean_int(data, "year", minimum=1)
    if "incident_type" in data:
        student.incident_type = clean_choice(data, "incident_type", ("none",) + INCIDENT_TYPES)
    if "contact_email" in data:
        student.contact_email = clean_email(data, "contact_email")
    if "faculty_id" in data:
        _apply_faculty(student, clean_int(data, "faculty_id"))

    db.session.commit()
    return jsonify(student.to_dict())


@students_bp.route("/<int:student_pk>", methods=["DELETE"])
@admin_required
def delete_student(student_pk):
    student = db.get_or_404(Student, student_pk, description="Student not found")
    db.session.delete(student)
    db.session.commit()

    current_app.logger.info(f"Student deleted: {student_pk}")
    return "", 204


@students_bp.route("/import", methods=["POST"])
@admin_required
def upload_students():
    file = request.files.get("file")

    if not file or not file.filename:
        abort(400, description="No file uploaded")

    if not allowed_file(file.filename, current_app.config["ALLOWED_EXTENSIONS"]):
        abort(400, description="Only CSV or XLSX files are allowed")

    filename = secure_filename(file.filename)
    filepath = os.path.join(current_app.config["UPLOAD_FOLDER"], filename)
    file.save(filepath)

    try:
        errors, success_count = import_students(filepath)
    finally:
        os.remove(filepath)

    current_app.logger.info(f"Student import: {success_count} saved, {len(errors)} errors")

    return jsonify({"imported": success_count, "errors": errors})

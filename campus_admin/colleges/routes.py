from flask import current_app, jsonify
from campus_admin.extensions import db
from campus_admin.models import College, Faculty
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.payload import get_payload, clean_text, clean_int
from campus_admin.utils.queries import faculty_year_stats, college_tree
from campus_admin.utils.rollup import serialize
from . import colleges_bp


# ---------------- COLLEGES ---------------- #

@colleges_bp.route("", methods=["GET"])
@login_required
def list_colleges():
    colleges = db.session.scalars(
        db.select(College).order_by(College.college_name)
    ).all()

    return jsonify([
        dict(college.to_dict(), faculty_count=len(college.faculties))
        for college in colleges
    ])


@colleges_bp.route("", methods=["POST"])
@admin_required
def create_college():
    data = get_payload()

    college = College(
        college_name=clean_text(data, "college_name", required=True),
        description=clean_text(data, "description", default="")
    )
    db.session.add(college)
    db.session.commit()

    current_app.logger.info(f"College created: {college.college_name}")
    return jsonify(college.to_dict()), 201


@colleges_bp.route("/<int:college_id>", methods=["PUT", "PATCH"])
@admin_required
def update_college(college_id):
    college = db.get_or_404(College, college_id, description="College not found")
    data = get_payload()

    if "college_name" in data:
        college.college_name = clean_text(data, "college_name", required=True)
    if "description" in data:
        college.description = clean_text(data, "description", default="")

    db.session.commit()
    return jsonify(college.to_dict())


@colleges_bp.route("/<int:college_id>", methods=["DELETE"])
@admin_required
def delete_college(college_id):
    college = db.get_or_404(College, college_id, description="College not found")

    # Faculties go with the college
    db.session.delete(college)
    db.session.commit()

    current_app.logger.info(f"College deleted: {college_id}")
    return "", 204


# ---------------- FACULTIES ---------------- #

@colleges_bp.route("/faculties", methods=["GET"])
@login_required
def list_faculties():
    faculties = db.session.scalars(
        db.select(Faculty).order_by(Faculty.faculty_name)
    ).all()
    return jsonify([faculty.to_dict() for faculty in faculties])


def _college_id(data):
    college_id = clean_int(data, "college_id", required=True)
    db.get_or_404(College, college_id, description="College not found")
    return college_id


@colleges_bp.route("/faculties", methods=["POST"])
@admin_required
def create_faculty():
    data = get_payload()

    faculty = Faculty(
        faculty_name=clean_text(data, "faculty_name", required=True),
        college_id=_college_id(data),
        description=clean_text(data, "description", default="")
    )
    db.session.add(faculty)
    db.session.commit()

    current_app.logger.info(f"Faculty created: {faculty.faculty_name}")
    return jsonify(faculty.to_dict()), 201


@colleges_bp.route("/faculties/<int:faculty_id>", methods=["PUT", "PATCH"])
@admin_required
def update_faculty(faculty_id):
    faculty = db.get_or_404(Faculty, faculty_id, description="Faculty not found")
    data = get_payload()

    if "faculty_name" in data:
        faculty.faculty_name = clean_text(data, "faculty_name", required=True)
    if "college_id" in data:
        faculty.college_id = _college_id(data)
    if "description" in data:
        faculty.description = clean_text(data, "description", default="")

    db.session.commit()
    return jsonify(faculty.to_dict())


@colleges_bp.route("/faculties/<int:faculty_id>", methods=["DELETE"])
@admin_required
def delete_faculty(faculty_id):
    faculty = db.get_or_404(Faculty, faculty_id, description="Faculty not found")
    db.session.delete(faculty)
    db.session.commit()
    return "", 204


# ---------------- STATISTICS ---------------- #

@colleges_bp.route("/stats", methods=["GET"])
@login_required
def stats():
    # Keys become strings in JSON
    return jsonify(serialize(faculty_year_stats()))


@colleges_bp.route("/tree", methods=["GET"])
@login_required
def tree():
    return jsonify(college_tree())

from flask import current_app, jsonify, request, abort
from campus_admin.extensions import db
from campus_admin.models import Staff
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.filters import SearchFilter
from campus_admin.utils.payload import get_payload, clean_text, clean_email
from . import staff_bp

SEARCH_FIELDS = ("full_name", "staff_id", "position")
TEXT_FIELDS = ("full_name", "position", "department", "contact_phone", "hostel_room")
REQUIRED = ("full_name", "position", "department")


@staff_bp.route("", methods=["GET"])
@login_required
def list_staff():
    staff = db.session.scalars(
        db.select(Staff).order_by(Staff.full_name)
    ).all()

    staff = SearchFilter.from_args(request.args).apply(staff, SEARCH_FIELDS)

    return jsonify([member.to_dict() for member in staff])


@staff_bp.route("", methods=["POST"])
@admin_required
def create_staff():
    data = get_payload()

    staff_id = clean_text(data, "staff_id", required=True)
    if Staff.query.filter_by(staff_id=staff_id).first():
        abort(409, description=f"Staff ID {staff_id} already exists")

    member = Staff(staff_id=staff_id, contact_email=clean_email(data, "contact_email"))
    for name in TEXT_FIELDS:
        setattr(member, name, clean_text(data, name, required=name in REQUIRED))

    db.session.add(member)
    db.session.commit()

    current_app.logger.info(f"Staff created: {member.staff_id}")
    return jsonify(member.to_dict()), 201


@staff_bp.route("/<int:staff_pk>", methods=["PUT", "PATCH"])
@admin_required
def update_staff(staff_pk):
    member = db.get_or_404(Staff, staff_pk, description="Staff member not found")
    data = get_payload()

    for name in TEXT_FIELDS:
        if name in data:
            setattr(member, name, clean_text(data, name, required=name in REQUIRED))
    if "contact_email" in data:
        member.contact_email = clean_email(data, "contact_email")

    db.session.commit()
    return jsonify(member.to_dict())


@staff_bp.route("/<int:staff_pk>", methods=["DELETE"])
@admin_required
def delete_staff(staff_pk):
    member = db.get_or_404(Staff, staff_pk, description="Staff member not found")
    db.session.delete(member)
    db.session.commit()

    current_app.logger.info(f"Staff deleted: {staff_pk}")
    return "", 204

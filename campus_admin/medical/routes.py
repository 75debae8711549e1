from datetime import datetime
from flask import current_app, jsonify
from campus_admin.extensions import db
from campus_admin.models import MedicalRecord, Student
from campus_admin.models.medical import MEDICAL_STATUSES, TREATMENT_TYPES
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.payload import get_payload, clean_text, clean_int, clean_choice
from campus_admin.utils.status import apply_medical_status, group_by_status
from . import medical_bp


@medical_bp.route("", methods=["GET"])
@login_required
def list_records():
    records = db.session.scalars(
        db.select(MedicalRecord).order_by(MedicalRecord.check_in_date.desc())
    ).all()

    groups = group_by_status(records, MEDICAL_STATUSES)

    return jsonify({
        status: [record.to_dict() for record in rows]
        for status, rows in groups.items()
    })


@medical_bp.route("", methods=["POST"])
@admin_required
def create_record():
    data = get_payload()

    student_pk = clean_int(data, "student_id", required=True)
    db.get_or_404(Student, student_pk, description="Student not found")

    record = MedicalRecord(
        student_id=student_pk,
        illness_description=clean_text(data, "illness_description", required=True),
        treatment_type=clean_choice(data, "treatment_type", TREATMENT_TYPES, default="in-school"),
        status=clean_choice(data, "status", MEDICAL_STATUSES, default="active"),
        check_in_date=datetime.utcnow(),
        notes=clean_text(data, "notes"),
    )
    db.session.add(record)
    db.session.commit()

    current_app.logger.info(f"Medical record opened for student {student_pk}")
    return jsonify(record.to_dict()), 201


@medical_bp.route("/<int:record_id>/status", methods=["POST"])
@admin_required
def update_status(record_id):
    record = db.get_or_404(MedicalRecord, record_id, description="Medical record not found")
    status = clean_choice(get_payload(), "status", MEDICAL_STATUSES)

    apply_medical_status(record, status)
    db.session.commit()

    current_app.logger.info(f"Medical record {record_id} -> {status}")
    return jsonify(record.to_dict())


@medical_bp.route("/<int:record_id>/discharge", methods=["POST"])
@admin_required
def discharge(record_id):
    record = db.get_or_404(MedicalRecord, record_id, description="Medical record not found")

    apply_medical_status(record, "discharged")
    db.session.commit()

    current_app.logger.info(f"Medical record {record_id} discharged")
    return jsonify(record.to_dict())

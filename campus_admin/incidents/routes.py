from datetime import date
from flask import current_app, jsonify, request
from flask_login import current_user
from campus_admin.extensions import db
from campus_admin.models import Student, StudentIncident
from campus_admin.models.academic import INCIDENT_TYPES
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.filters import IncidentFilter
from campus_admin.utils.payload import (
    get_payload, clean_text, clean_int, clean_choice, clean_date
)
from campus_admin.utils.rollup import count_by
from . import incidents_bp


@incidents_bp.route("", methods=["GET"])
@login_required
def list_incidents():
    incidents = db.session.scalars(
        db.select(StudentIncident).order_by(
            StudentIncident.incident_date.desc(),
            StudentIncident.id.desc()
        )
    ).all()

    counts = count_by(incidents, "incident_type", known=INCIDENT_TYPES)
    counts["all"] = len(incidents)

    filtered = IncidentFilter.from_args(request.args).apply(incidents)

    return jsonify({
        "counts": counts,
        "incidents": [incident.to_dict() for incident in filtered],
    })


def _fill_incident(incident, data):
    student_pk = clean_int(data, "student_id", required=True)
    student = db.get_or_404(Student, student_pk, description="Student not found")

    incident.student = student
    incident.incident_type = clean_choice(data, "incident_type", INCIDENT_TYPES)
    incident.incident_date = clean_date(data, "incident_date", default=date.today())
    incident.reason = clean_text(data, "reason", required=True)
    incident.notes = clean_text(data, "notes")
    incident.reported_by = current_user.id

    # The student's current flag follows the latest recorded incident
    student.incident_type = incident.incident_type


@incidents_bp.route("", methods=["POST"])
@admin_required
def create_incident():
    incident = StudentIncident()
    _fill_incident(incident, get_payload())

    db.session.add(incident)
    db.session.commit()

    current_app.logger.info(
        f"Incident recorded for {incident.student.student_id}: {incident.incident_type}"
    )
    return jsonify(incident.to_dict()), 201


@incidents_bp.route("/<int:incident_id>", methods=["PUT"])
@admin_required
def update_incident(incident_id):
    incident = db.get_or_404(StudentIncident, incident_id, description="Incident not found")
    _fill_incident(incident, get_payload())

    db.session.commit()
    return jsonify(incident.to_dict())


@incidents_bp.route("/<int:incident_id>", methods=["DELETE"])
@admin_required
def delete_incident(incident_id):
    incident = db.get_or_404(StudentIncident, incident_id, description="Incident not found")
    db.session.delete(incident)
    db.session.commit()
    return "", 204

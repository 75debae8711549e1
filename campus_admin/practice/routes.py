from datetime import date
from flask import current_app, jsonify
from campus_admin.extensions import db
from campus_admin.models import ExternalPracticeSession
from campus_admin.models.inventory import PRACTICE_STATUSES
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.payload import (
    get_payload, clean_text, clean_choice, clean_date, clean_list
)
from campus_admin.utils.status import group_by_status
from . import practice_bp


@practice_bp.route("", methods=["GET"])
@login_required
def list_sessions():
    sessions = db.session.scalars(
        db.select(ExternalPracticeSession).order_by(ExternalPracticeSession.date)
    ).all()

    groups = group_by_status(sessions, PRACTICE_STATUSES)

    return jsonify({
        status: [session.to_dict() for session in rows]
        for status, rows in groups.items()
    })


@practice_bp.route("", methods=["POST"])
@admin_required
def create_session():
    data = get_payload()

    session = ExternalPracticeSession(
        session_name=clean_text(data, "session_name", required=True),
        location=clean_text(data, "location", required=True),
        date=clean_date(data, "date", default=date.today()),
        start_time=clean_text(data, "start_time", required=True),
        end_time=clean_text(data, "end_time", required=True),
        students_attending=clean_list(data, "students_attending"),
        materials_needed=clean_list(data, "materials_needed"),
        preparation_checklist=clean_list(data, "preparation_checklist"),
        transport_details=clean_text(data, "transport_details"),
        status=clean_choice(data, "status", PRACTICE_STATUSES, default="planned"),
        notes=clean_text(data, "notes"),
    )
    db.session.add(session)
    db.session.commit()

    current_app.logger.info(f"Practice session planned: {session.session_name}")
    return jsonify(session.to_dict()), 201


@practice_bp.route("/<int:session_id>/status", methods=["POST"])
@admin_required
def update_status(session_id):
    session = db.get_or_404(ExternalPracticeSession, session_id, description="Practice session not found")

    session.status = clean_choice(get_payload(), "status", PRACTICE_STATUSES)
    db.session.commit()

    current_app.logger.info(f"Practice session {session_id} -> {session.status}")
    return jsonify(session.to_dict())

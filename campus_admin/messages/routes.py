from flask import current_app, jsonify
from campus_admin.extensions import db
from campus_admin.models import ChatbotMessage
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.payload import get_payload, clean_text, clean_email
from campus_admin.utils.status import group_by_status
from . import messages_bp


@messages_bp.route("", methods=["GET"])
@login_required
def inbox():
    messages = db.session.scalars(
        db.select(ChatbotMessage).order_by(
            ChatbotMessage.created_at.desc(),
            ChatbotMessage.id.desc()
        )
    ).all()

    groups = group_by_status(messages, ("pending", "answered"))

    return jsonify({
        status: [message.to_dict() for message in rows]
        for status, rows in groups.items()
    })


# Open to visitors: no login
@messages_bp.route("", methods=["POST"])
def submit_message():
    data = get_payload()

    message = ChatbotMessage(
        sender_name=clean_text(data, "sender_name", required=True),
        sender_email=clean_email(data, "sender_email"),
        message=clean_text(data, "message", required=True),
    )
    db.session.add(message)
    db.session.commit()

    current_app.logger.info(f"Message received from {message.sender_name}")
    return jsonify(message.to_dict()), 201


@messages_bp.route("/<int:message_id>/respond", methods=["POST"])
@admin_required
def respond(message_id):
    message = db.get_or_404(ChatbotMessage, message_id, description="Message not found")

    message.response = clean_text(get_payload(), "response", required=True)
    message.status = "answered"
    db.session.commit()

    return jsonify(message.to_dict())

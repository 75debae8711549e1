from flask import current_app, jsonify
from flask_login import current_user
from campus_admin.extensions import db
from campus_admin.models import Announcement
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.payload import get_payload, clean_text
from . import announcements_bp


@announcements_bp.route("", methods=["GET"])
@login_required
def list_announcements():
    announcements = db.session.scalars(
        db.select(Announcement).order_by(
            Announcement.created_at.desc(),
            Announcement.id.desc()
        )
    ).all()
    return jsonify([item.to_dict() for item in announcements])


@announcements_bp.route("", methods=["POST"])
@admin_required
def create_announcement():
    data = get_payload()

    announcement = Announcement(
        title=clean_text(data, "title", required=True),
        content=clean_text(data, "content", required=True),
        category=clean_text(data, "category", default="general"),
        created_by=current_user.id,
    )
    db.session.add(announcement)
    db.session.commit()

    current_app.logger.info(f"Announcement posted: {announcement.title}")
    return jsonify(announcement.to_dict()), 201


@announcements_bp.route("/<int:announcement_id>", methods=["DELETE"])
@admin_required
def delete_announcement(announcement_id):
    announcement = db.get_or_404(Announcement, announcement_id, description="Announcement not found")
    db.session.delete(announcement)
    db.session.commit()
    return "", 204

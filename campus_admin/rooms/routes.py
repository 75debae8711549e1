from flask import jsonify
from campus_admin.extensions import db
from campus_admin.models import LectureRoom
from campus_admin.models.facilities import ROOM_STATUSES
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.payload import get_payload, clean_text, clean_int, clean_choice
from . import rooms_bp


def _fill(room, data, partial=False):
    if not partial or "room_name" in data:
        room.room_name = clean_text(data, "room_name", required=True)
    if not partial or "capacity" in data:
        room.capacity = clean_int(data, "capacity", required=True, minimum=0)
    if not partial or "location" in data:
        room.location = clean_text(data, "location", required=True)
    if not partial or "equipment" in data:
        room.equipment = clean_text(data, "equipment")
    if not partial or "status" in data:
        room.status = clean_choice(data, "status", ROOM_STATUSES, default="available")


@rooms_bp.route("", methods=["GET"])
@login_required
def list_rooms():
    rooms = db.session.scalars(
        db.select(LectureRoom).order_by(LectureRoom.room_name)
    ).all()
    return jsonify([room.to_dict() for room in rooms])


@rooms_bp.route("", methods=["POST"])
@admin_required
def create_room():
    room = LectureRoom()
    _fill(room, get_payload())

    db.session.add(room)
    db.session.commit()
    return jsonify(room.to_dict()), 201


@rooms_bp.route("/<int:room_id>", methods=["PUT", "PATCH"])
@admin_required
def update_room(room_id):
    room = db.get_or_404(LectureRoom, room_id, description="Room not found")
    _fill(room, get_payload(), partial=True)

    db.session.commit()
    return jsonify(room.to_dict())


@rooms_bp.route("/<int:room_id>", methods=["DELETE"])
@admin_required
def delete_room(room_id):
    room = db.get_or_404(LectureRoom, room_id, description="Room not found")
    db.session.delete(room)
    db.session.commit()
    return "", 204

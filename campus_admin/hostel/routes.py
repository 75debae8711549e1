from datetime import date
from flask import current_app, jsonify, request
from campus_admin.extensions import db
from campus_admin.models import HostelHouse, HostelRoom, HostelOccupant, Staff
from campus_admin.utils.decorators import login_required, admin_required
from campus_admin.utils.filters import OccupantFilter
from campus_admin.utils.payload import (
    get_payload, clean_text, clean_int, clean_choice, clean_date
)
from campus_admin.utils.status import room_status_for_occupant, check_out_occupant
from . import hostel_bp

OCCUPANT_STATUSES = ("checked_in", "checked_out")


def hostel_stats(rooms, occupants):
    checked_in = [occ for occ in occupants if occ.status == "checked_in"]
    return {
        "totalRooms": len(rooms),
        "occupied": sum(1 for room in rooms if room.status == "occupied"),
        "available": sum(1 for room in rooms if room.status == "available"),
        "maleOccupants": sum(1 for occ in checked_in if occ.gender == "male"),
        "femaleOccupants": sum(1 for occ in checked_in if occ.gender == "female"),
    }


def _all_rooms():
    return db.session.scalars(
        db.select(HostelRoom).order_by(HostelRoom.room_number)
    ).all()


def _all_occupants():
    return db.session.scalars(
        db.select(HostelOccupant).order_by(HostelOccupant.check_in_date.desc())
    ).all()


# ---------------- HOUSES & ROOMS ---------------- #

@hostel_bp.route("/houses", methods=["GET"])
@login_required
def list_houses():
    houses = db.session.scalars(
        db.select(HostelHouse).order_by(HostelHouse.house_number)
    ).all()
    return jsonify([house.to_dict() for house in houses])


@hostel_bp.route("/houses", methods=["POST"])
@admin_required
def create_house():
    data = get_payload()
    house = HostelHouse(
        house_name=clean_text(data, "house_name", required=True),
        house_number=clean_int(data, "house_number", required=True, minimum=1),
        description=clean_text(data, "description"),
    )
    db.session.add(house)
    db.session.commit()
    return jsonify(house.to_dict()), 201


@hostel_bp.route("/rooms", methods=["GET"])
@login_required
def list_rooms():
    rooms = _all_rooms()

    house_id = request.args.get("house_id", type=int)
    if house_id is not None:
        rooms = [room for room in rooms if room.house_id == house_id]

    return jsonify([room.to_dict() for room in rooms])


@hostel_bp.route("/rooms", methods=["POST"])
@admin_required
def create_room():
    data = get_payload()

    house_id = clean_int(data, "house_id", required=True)
    db.get_or_404(HostelHouse, house_id, description="House not found")

    room = HostelRoom(
        house_id=house_id,
        room_number=clean_text(data, "room_number", required=True),
        capacity=clean_int(data, "capacity", default=1, minimum=1),
    )
    db.session.add(room)
    db.session.commit()
    return jsonify(room.to_dict()), 201


# ---------------- OCCUPANTS ---------------- #

@hostel_bp.route("/occupants", methods=["GET"])
@login_required
def list_occupants():
    occupants = OccupantFilter.from_args(request.args).apply(_all_occupants())
    return jsonify([occ.to_dict() for occ in occupants])


@hostel_bp.route("/stats", methods=["GET"])
@login_required
def stats():
    return jsonify(hostel_stats(_all_rooms(), _all_occupants()))


def _fill_occupant(occupant, data):
    room_id = clean_int(data, "room_id", required=True)
    room = db.get_or_404(HostelRoom, room_id, description="Room not found")

    staff_pk = clean_int(data, "staff_id")
    if staff_pk is not None:
        db.get_or_404(Staff, staff_pk, description="Staff member not found")

    occupant.room = room
    occupant.staff_id = staff_pk
    occupant.occupant_name = clean_text(data, "occupant_name", required=True)
    occupant.gender = clean_choice(data, "gender", ("male", "female"))
    occupant.subject_teaching = clean_text(data, "subject_teaching", default="")
    occupant.year_level = clean_text(data, "year_level", default="")
    occupant.check_in_date = clean_date(data, "check_in_date", default=date.today())
    occupant.check_out_date = clean_date(data, "check_out_date")
    occupant.status = clean_choice(data, "status", OCCUPANT_STATUSES, default="checked_in")
    occupant.notes = clean_text(data, "notes")


def _save_occupant(occupant, previous_room=None):
    room = occupant.room
    room.status = room_status_for_occupant(occupant.status)

    # Moving an occupant frees the old room
    if previous_room is not None and previous_room.id != room.id:
        previous_room.status = "available"

    db.session.commit()

    current_app.logger.info(
        f"Occupant {occupant.occupant_name} in room {room.room_number}: {occupant.status}"
    )


@hostel_bp.route("/occupants", methods=["POST"])
@admin_required
def check_in():
    occupant = HostelOccupant()
    _fill_occupant(occupant, get_payload())

    db.session.add(occupant)
    _save_occupant(occupant)

    return jsonify(occupant.to_dict()), 201


@hostel_bp.route("/occupants/<int:occupant_id>", methods=["PUT"])
@admin_required
def update_occupant(occupant_id):
    occupant = db.get_or_404(HostelOccupant, occupant_id, description="Occupant not found")
    previous_room = occupant.room

    _fill_occupant(occupant, get_payload())
    _save_occupant(occupant, previous_room)

    return jsonify(occupant.to_dict())


@hostel_bp.route("/occupants/<int:occupant_id>/checkout", methods=["POST"])
@admin_required
def check_out(occupant_id):
    occupant = db.get_or_404(HostelOccupant, occupant_id, description="Occupant not found")

    check_out_occupant(occupant)
    db.session.commit()

    current_app.logger.info(f"Occupant {occupant.occupant_name} checked out")
    return jsonify(occupant.to_dict())


@hostel_bp.route("/occupants/<int:occupant_id>", methods=["DELETE"])
@admin_required
def delete_occupant(occupant_id):
    occupant = db.get_or_404(HostelOccupant, occupant_id, description="Occupant not found")

    occupant.room.status = "available"
    db.session.delete(occupant)
    db.session.commit()

    return "", 204

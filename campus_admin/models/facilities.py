from datetime import date
from campus_admin.extensions import db
from .base import TimestampMixin, SerializerMixin

ROOM_STATUSES = ("available", "occupied")

# ---------------- LECTURE ROOMS ---------------- #

class LectureRoom(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "lecture_rooms"

    id = db.Column(db.Integer, primary_key=True)

    room_name = db.Column(db.String(100), nullable=False)

    capacity = db.Column(db.Integer, nullable=False, default=0)

    location = db.Column(db.String(150), nullable=False)

    equipment = db.Column(db.Text)

    status = db.Column(
        db.Enum(*ROOM_STATUSES, name="lecture_room_status"),
        default="available",
        nullable=False
    )


# ---------------- HOSTEL ---------------- #

class HostelHouse(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "hostel_houses"

    id = db.Column(db.Integer, primary_key=True)

    house_name = db.Column(db.String(100), nullable=False)

    house_number = db.Column(db.Integer, unique=True, nullable=False)

    description = db.Column(db.Text)

    rooms = db.relationship(
        "HostelRoom",
        backref="house",
        lazy=True,
        cascade="all, delete-orphan"
    )


class HostelRoom(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "hostel_rooms"

    id = db.Column(db.Integer, primary_key=True)

    house_id = db.Column(
        db.Integer,
        db.ForeignKey("hostel_houses.id", ondelete="CASCADE"),
        nullable=False
    )

    room_number = db.Column(db.String(20), nullable=False)

    capacity = db.Column(db.Integer, default=1)

    status = db.Column(
        db.Enum(*ROOM_STATUSES, name="hostel_room_status"),
        default="available",
        nullable=False
    )

    __table_args__ = (
        db.UniqueConstraint("house_id", "room_number"),
    )

    def to_dict(self):
        data = super().to_dict()
        data["house_name"] = self.house.house_name
        return data


class HostelOccupant(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "hostel_occupants"

    id = db.Column(db.Integer, primary_key=True)

    room_id = db.Column(
        db.Integer,
        db.ForeignKey("hostel_rooms.id", ondelete="CASCADE"),
        nullable=False
    )

    staff_id = db.Column(db.Integer, db.ForeignKey("staff.id", ondelete="SET NULL"))

    occupant_name = db.Column(db.String(150), nullable=False)

    gender = db.Column(
        db.Enum("male", "female", name="occupant_gender"),
        nullable=False
    )

    subject_teaching = db.Column(db.String(100), default="")

    year_level = db.Column(db.String(50), default="")

    check_in_date = db.Column(db.Date, default=date.today, nullable=False)

    check_out_date = db.Column(db.Date)

    status = db.Column(
        db.Enum("checked_in", "checked_out", name="occupant_status"),
        default="checked_in",
        nullable=False
    )

    notes = db.Column(db.Text)

    room = db.relationship("HostelRoom")

    def to_dict(self):
        data = super().to_dict()
        data["room_number"] = self.room.room_number
        data["house_name"] = self.room.house.house_name
        return data

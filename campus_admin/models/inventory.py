from datetime import date
from campus_admin.extensions import db
from .base import TimestampMixin, SerializerMixin

MATERIAL_STATUSES = ("available", "low_stock", "out_of_stock")
PRACTICE_STATUSES = ("planned", "in-progress", "completed")


class Material(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "materials"

    id = db.Column(db.Integer, primary_key=True)

    material_name = db.Column(db.String(150), nullable=False)

    category = db.Column(db.String(100), nullable=False)

    quantity = db.Column(db.Integer, nullable=False, default=0)

    location = db.Column(db.String(150), nullable=False)

    status = db.Column(
        db.Enum(*MATERIAL_STATUSES, name="material_status"),
        default="available",
        nullable=False
    )


class ExternalPracticeSession(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "external_practice_sessions"

    id = db.Column(db.Integer, primary_key=True)

    session_name = db.Column(db.String(150), nullable=False)

    location = db.Column(db.String(150), nullable=False)

    date = db.Column(db.Date, default=date.today, nullable=False)

    start_time = db.Column(db.String(10), nullable=False)
    end_time = db.Column(db.String(10), nullable=False)

    students_attending = db.Column(db.JSON, default=list)
    materials_needed = db.Column(db.JSON, default=list)

    transport_details = db.Column(db.Text)

    status = db.Column(
        db.Enum(*PRACTICE_STATUSES, name="practice_status"),
        default="planned",
        nullable=False
    )

    preparation_checklist = db.Column(db.JSON, default=list)

    notes = db.Column(db.Text)

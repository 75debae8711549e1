from campus_admin.extensions import db
from .base import TimestampMixin, SerializerMixin


class Staff(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "staff"

    id = db.Column(db.Integer, primary_key=True)

    staff_id = db.Column(db.String(50), unique=True, nullable=False)

    full_name = db.Column(db.String(150), nullable=False)

    position = db.Column(db.String(100), nullable=False)

    department = db.Column(db.String(100), nullable=False)

    contact_phone = db.Column(db.String(30))
    contact_email = db.Column(db.String(120))

    hostel_room = db.Column(db.String(50))

from datetime import datetime
from campus_admin.extensions import db
from .base import TimestampMixin, SerializerMixin

MEDICAL_STATUSES = ("active", "recovering", "discharged")
TREATMENT_TYPES = ("in-school", "external")


class MedicalRecord(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "medical_records"

    id = db.Column(db.Integer, primary_key=True)

    student_id = db.Column(
        db.Integer,
        db.ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False
    )

    illness_description = db.Column(db.Text, nullable=False)

    treatment_type = db.Column(
        db.Enum(*TREATMENT_TYPES, name="treatment_type"),
        default="in-school",
        nullable=False
    )

    status = db.Column(
        db.Enum(*MEDICAL_STATUSES, name="medical_status"),
        default="active",
        nullable=False
    )

    check_in_date = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    check_out_date = db.Column(db.DateTime)

    notes = db.Column(db.Text)

    student = db.relationship("Student")

    def to_dict(self):
        data = super().to_dict()
        data["student"] = {
            "full_name": self.student.full_name,
            "student_id": self.student.student_id,
        } if self.student else None
        return data

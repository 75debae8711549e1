from datetime import date
from campus_admin.extensions import db
from .base import TimestampMixin, SerializerMixin

GENDERS = ("male", "female", "other")
INCIDENT_TYPES = ("repeat", "dismissed", "medical_discharge")

# ---------------- COLLEGES ---------------- #

class College(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "colleges"

    id = db.Column(db.Integer, primary_key=True)

    college_name = db.Column(db.String(150), unique=True, nullable=False)

    description = db.Column(db.Text)

    faculties = db.relationship(
        "Faculty",
        backref="college",
        lazy=True,
        cascade="all, delete-orphan",
        order_by="Faculty.faculty_name"
    )


class Faculty(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "faculties"

    id = db.Column(db.Integer, primary_key=True)

    college_id = db.Column(
        db.Integer,
        db.ForeignKey("colleges.id", ondelete="CASCADE"),
        nullable=False
    )

    faculty_name = db.Column(db.String(150), nullable=False)

    description = db.Column(db.Text)

    __table_args__ = (
        db.UniqueConstraint("college_id", "faculty_name"),
    )


# ---------------- STUDENTS ---------------- #

class Student(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True)

    student_id = db.Column(db.String(50), unique=True, nullable=False)

    full_name = db.Column(db.String(150), nullable=False)

    # Free-text faculty label kept alongside faculty_id
    faculty = db.Column(db.String(150))

    program = db.Column(db.String(150))

    gender = db.Column(
        db.Enum(*GENDERS, name="student_gender"),
        nullable=False
    )

    college_id = db.Column(
        db.Integer,
        db.ForeignKey("colleges.id", ondelete="SET NULL")
    )

    faculty_id = db.Column(
        db.Integer,
        db.ForeignKey("faculties.id", ondelete="SET NULL")
    )

    year = db.Column(db.Integer)

    incident_type = db.Column(
        db.Enum("none", *INCIDENT_TYPES, name="student_incident_type"),
        default="none",
        nullable=False
    )

    contact_phone = db.Column(db.String(30))
    contact_email = db.Column(db.String(120))

    photo_url = db.Column(db.String(255))

    college = db.relationship("College")
    faculty_ref = db.relationship("Faculty")

    @property
    def faculty_label(self):
        if self.faculty_ref is not None:
            return self.faculty_ref.faculty_name
        return self.faculty


class StudentIncident(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "student_incidents"

    id = db.Column(db.Integer, primary_key=True)

    student_id = db.Column(
        db.Integer,
        db.ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False
    )

    incident_type = db.Column(
        db.Enum(*INCIDENT_TYPES, name="incident_type"),
        nullable=False
    )

    incident_date = db.Column(db.Date, default=date.today, nullable=False)

    reason = db.Column(db.Text, nullable=False)

    notes = db.Column(db.Text)

    reported_by = db.Column(db.Integer, db.ForeignKey("profiles.id"))

    student = db.relationship(
        "Student",
        backref=db.backref("incidents", cascade="all, delete-orphan", passive_deletes=True)
    )

    def to_dict(self):
        data = super().to_dict()
        student = self.student
        data["student"] = {
            "student_id": student.student_id,
            "full_name": student.full_name,
            "faculty": student.faculty_label,
            "year": student.year,
            "college_name": student.college.college_name if student.college else None,
        }
        return data

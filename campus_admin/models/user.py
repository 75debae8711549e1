from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from campus_admin.extensions import db
from .base import TimestampMixin, SerializerMixin


class Profile(UserMixin, TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "profiles"

    id = db.Column(db.Integer, primary_key=True)

    full_name = db.Column(db.String(150), nullable=False)

    email = db.Column(db.String(120), unique=True, nullable=False)

    password_hash = db.Column(db.String(255), nullable=False)

    role = db.Column(
        db.Enum("admin", "guest", name="profile_role"),
        default="guest",
        nullable=False
    )

    # ------------------
    # Auth helpers
    # ------------------

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        data = super().to_dict()
        data.pop("password_hash")
        return data

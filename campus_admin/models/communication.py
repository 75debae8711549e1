from campus_admin.extensions import db
from .base import TimestampMixin, SerializerMixin


class Announcement(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "announcements"

    id = db.Column(db.Integer, primary_key=True)

    title = db.Column(db.String(200), nullable=False)

    content = db.Column(db.Text, nullable=False)

    category = db.Column(db.String(50), default="general", nullable=False)

    created_by = db.Column(db.Integer, db.ForeignKey("profiles.id"))


class ChatbotMessage(TimestampMixin, SerializerMixin, db.Model):
    __tablename__ = "chatbot_messages"

    id = db.Column(db.Integer, primary_key=True)

    sender_name = db.Column(db.String(150), nullable=False)

    sender_email = db.Column(db.String(120))

    message = db.Column(db.Text, nullable=False)

    response = db.Column(db.Text)

    status = db.Column(
        db.Enum("pending", "answered", name="message_status"),
        default="pending",
        nullable=False
    )

from datetime import date, datetime, time
from campus_admin.extensions import db


class TimestampMixin:

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    updated_at = db.Column(
        db.DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )


class SerializerMixin:

    def to_dict(self):
        data = {}
        for column in self.__table__.columns:
            data[column.name] = _to_json(getattr(self, column.name))
        return data


def _to_json(value):
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value

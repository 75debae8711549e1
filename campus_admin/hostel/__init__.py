from flask import Blueprint

hostel_bp = Blueprint("hostel", __name__, url_prefix="/hostel")

from . import routes  # noqa: E402,F401

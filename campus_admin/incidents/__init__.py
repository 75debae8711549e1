from flask import Blueprint

incidents_bp = Blueprint("incidents", __name__, url_prefix="/incidents")

from . import routes  # noqa: E402,F401

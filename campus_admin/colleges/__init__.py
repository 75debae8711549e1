from flask import Blueprint

colleges_bp = Blueprint("colleges", __name__, url_prefix="/colleges")

from . import routes  # noqa: E402,F401

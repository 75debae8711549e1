from flask import Blueprint

main_bp = Blueprint("main", __name__, url_prefix="/dashboard")

from . import routes  # noqa: E402,F401

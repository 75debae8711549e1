from flask import current_app, jsonify, abort
from flask_login import login_user, logout_user, current_user
from campus_admin.models.user import Profile
from campus_admin.utils.decorators import login_required
from campus_admin.utils.payload import get_payload, clean_text
from .loaders import load_user  # noqa: F401
from . import auth_bp


@auth_bp.route("/login", methods=["POST"])
def login():
    data = get_payload()

    email = (clean_text(data, "email", required=True)).lower()
    password = data.get("password") or ""

    profile = Profile.query.filter_by(email=email).first()

    if not profile or not profile.check_password(password):
        current_app.logger.warning(f"Failed login attempt for {email}")
        abort(401, description="Invalid credentials")

    login_user(profile)
    current_app.logger.info(f"{profile.email} logged in")

    return jsonify(profile.to_dict())


@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return jsonify({"message": "You have been logged out"})


@auth_bp.route("/me")
@login_required
def me():
    return jsonify(current_user.to_dict())

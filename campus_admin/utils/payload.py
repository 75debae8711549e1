from datetime import date
from email_validator import validate_email, EmailNotValidError
from flask import abort, request


def get_payload():
    """JSON body of the request, falling back to form fields."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    return data


def clean_text(data, name, required=False, default=None):
    value = data.get(name, default)
    if isinstance(value, str):
        value = value.strip()
    if required and not value:
        abort(400, description=f"{name} is required")
    return value if value != "" else default


def clean_choice(data, name, choices, default=None):
    value = data.get(name, default)
    if value not in choices:
        abort(400, description=f"{name} must be one of: {', '.join(choices)}")
    return value


def clean_int(data, name, required=False, default=None, minimum=None):
    value = data.get(name, default)
    if value in (None, ""):
        if required:
            abort(400, description=f"{name} is required")
        return default
    try:
        value = int(value)
    except (TypeError, ValueError):
        abort(400, description=f"{name} must be a whole number")
    if minimum is not None and value < minimum:
        abort(400, description=f"{name} must be at least {minimum}")
    return value


def clean_date(data, name, default=None):
    value = data.get(name)
    if not value:
        return default
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        abort(400, description=f"{name} must be a date (YYYY-MM-DD)")


def clean_email(data, name):
    email = clean_text(data, name)
    if not email:
        return None
    try:
        valid = validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        abort(400, description=f"Invalid email: {str(e)}")
    return valid.normalized


def clean_list(data, name):
    value = data.get(name) or []
    if not isinstance(value, list):
        abort(400, description=f"{name} must be a list")
    return value

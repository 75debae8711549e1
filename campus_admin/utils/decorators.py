from functools import wraps
from flask import abort
from flask_login import current_user


def login_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):

        if not current_user.is_authenticated:
            abort(401, description="Please log in first")

        return f(*args, **kwargs)

    return wrapper


def roles_required(*roles):

    def decorator(f):

        @wraps(f)
        def wrapper(*args, **kwargs):

            if not current_user.is_authenticated:
                abort(401, description="Please log in first")

            if current_user.role not in roles:
                abort(403, description="You do not have permission")

            return f(*args, **kwargs)

        return wrapper

    return decorator


admin_required = roles_required("admin")

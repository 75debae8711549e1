from campus_admin.extensions import db, login_manager
from campus_admin.models.user import Profile


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(Profile, int(user_id))

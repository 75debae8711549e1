from campus_admin.auth import auth_bp
from campus_admin.main import main_bp
from campus_admin.colleges import colleges_bp
from campus_admin.students import students_bp
from campus_admin.staff import staff_bp
from campus_admin.rooms import rooms_bp
from campus_admin.medical import medical_bp
from campus_admin.materials import materials_bp
from campus_admin.practice import practice_bp
from campus_admin.hostel import hostel_bp
from campus_admin.incidents import incidents_bp
from campus_admin.announcements import announcements_bp
from campus_admin.messages import messages_bp
from campus_admin.reports import reports_bp


def register_blueprints(app):
    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(colleges_bp)
    app.register_blueprint(students_bp)
    app.register_blueprint(staff_bp)
    app.register_blueprint(rooms_bp)
    app.register_blueprint(medical_bp)
    app.register_blueprint(materials_bp)
    app.register_blueprint(practice_bp)
    app.register_blueprint(hostel_bp)
    app.register_blueprint(incidents_bp)
    app.register_blueprint(announcements_bp)
    app.register_blueprint(messages_bp)
    app.register_blueprint(reports_bp)

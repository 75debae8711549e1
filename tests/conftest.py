import pytest
from campus_admin import create_app
from campus_admin.config import TestingConfig
from campus_admin.extensions import db
from campus_admin.models import Profile

ADMIN_EMAIL = "admin@school.test"
GUEST_EMAIL = "guest@school.test"
PASSWORD = "Secret123"


@pytest.fixture
def app():
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()

        for email, role in ((ADMIN_EMAIL, "admin"), (GUEST_EMAIL, "guest")):
            profile = Profile(full_name=role.title(), email=email, role=role)
            profile.set_password(PASSWORD)
            db.session.add(profile)
        db.session.commit()

    # No app context stays pushed: Flask-Login caches the user on g
    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _logged_in(app, email):
    client = app.test_client()
    response = client.post("/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_client(app):
    return _logged_in(app, ADMIN_EMAIL)


@pytest.fixture
def guest_client(app):
    return _logged_in(app, GUEST_EMAIL)


@pytest.fixture
def college(admin_client):
    return admin_client.post("/colleges", json={"college_name": "College of Science"}).get_json()


@pytest.fixture
def faculty(admin_client, college):
    return admin_client.post(
        "/colleges/faculties",
        json={"faculty_name": "Faculty of Physics", "college_id": college["id"]}
    ).get_json()


@pytest.fixture
def make_student(admin_client):
    counter = iter(range(1, 1000))

    def make(**fields):
        data = {
            "student_id": f"STU{next(counter):03d}",
            "full_name": "Test Student",
            "gender": "male",
        }
        data.update(fields)
        response = admin_client.post("/students", json=data)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return make

import click
from .extensions import db
from .models import College, Faculty, HostelHouse, HostelRoom, Profile


COLLEGES = [
    ("College of Health Sciences", "Nursing, midwifery and allied health programmes", [
        ("Faculty of Nursing", "General and specialised nursing"),
        ("Faculty of Midwifery", "Midwifery and maternal care"),
    ]),
    ("College of Education", "Teacher training programmes", [
        ("Faculty of Science Education", "Mathematics and science teaching"),
        ("Faculty of Arts Education", "Languages and humanities teaching"),
    ]),
]

HOUSES = [
    (1, "Unity House", ["101", "102", "103", "104"]),
    (2, "Harmony House", ["201", "202", "203", "204"]),
]


def seed_initial_data():

    # -----------------------------
    # Colleges & faculties
    # -----------------------------

    for college_name, description, faculties in COLLEGES:

        college = College.query.filter_by(college_name=college_name).first()

        if not college:
            college = College(college_name=college_name, description=description)
            db.session.add(college)
            db.session.flush()

        for faculty_name, faculty_desc in faculties:

            exists = Faculty.query.filter_by(
                college_id=college.id,
                faculty_name=faculty_name
            ).first()

            if not exists:
                db.session.add(Faculty(
                    college_id=college.id,
                    faculty_name=faculty_name,
                    description=faculty_desc
                ))

    # -----------------------------
    # Hostel houses & rooms
    # -----------------------------

    for number, house_name, rooms in HOUSES:

        house = HostelHouse.query.filter_by(house_number=number).first()

        if not house:
            house = HostelHouse(house_number=number, house_name=house_name)
            db.session.add(house)
            db.session.flush()

        for room_number in rooms:

            exists = HostelRoom.query.filter_by(
                house_id=house.id,
                room_number=room_number
            ).first()

            if not exists:
                db.session.add(HostelRoom(house_id=house.id, room_number=room_number))

    db.session.commit()


def create_admin(email, full_name, password):
    email = email.strip().lower()
    profile = Profile.query.filter_by(email=email).first()

    if profile is None:
        profile = Profile(email=email)
        db.session.add(profile)

    profile.full_name = full_name
    profile.role = "admin"
    profile.set_password(password)
    db.session.commit()

    return profile


def register_commands(app):

    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed")
    def seed_command():
        """Insert demo colleges, faculties and hostel rooms."""
        seed_initial_data()
        click.echo("Database seeded successfully.")

    @app.cli.command("create-admin")
    @click.option("--email", prompt=True)
    @click.option("--full-name", prompt=True)
    @click.password_option()
    def create_admin_command(email, full_name, password):
        """Create (or reset) an admin profile."""
        profile = create_admin(email, full_name, password)
        click.echo(f"Admin {profile.email} ready.")

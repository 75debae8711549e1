import pytest


@pytest.fixture
def house(admin_client):
    return admin_client.post(
        "/hostel/houses", json={"house_name": "Unity House", "house_number": 1}
    ).get_json()


@pytest.fixture
def rooms(admin_client, house):
    return [
        admin_client.post(
            "/hostel/rooms", json={"house_id": house["id"], "room_number": number}
        ).get_json()
        for number in ("101", "102", "103")
    ]


def check_in(client, room, **fields):
    data = {
        "room_id": room["id"],
        "occupant_name": "Mary Teacher",
        "gender": "female",
        "subject_teaching": "Biology",
    }
    data.update(fields)
    response = client.post("/hostel/occupants", json=data)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def room_status(client, room_id):
    rooms = client.get("/hostel/rooms").get_json()
    return next(r["status"] for r in rooms if r["id"] == room_id)


def test_check_in_occupies_room(admin_client, rooms):
    occupant = check_in(admin_client, rooms[0])

    assert occupant["status"] == "checked_in"
    assert occupant["house_name"] == "Unity House"
    assert room_status(admin_client, rooms[0]["id"]) == "occupied"


def test_check_out_frees_room(admin_client, rooms):
    occupant = check_in(admin_client, rooms[0])

    response = admin_client.post(f"/hostel/occupants/{occupant['id']}/checkout")

    body = response.get_json()
    assert body["status"] == "checked_out"
    assert body["check_out_date"] is not None
    assert room_status(admin_client, rooms[0]["id"]) == "available"


def test_delete_occupant_frees_room(admin_client, rooms):
    occupant = check_in(admin_client, rooms[1])

    assert admin_client.delete(f"/hostel/occupants/{occupant['id']}").status_code == 204
    assert room_status(admin_client, rooms[1]["id"]) == "available"


def test_moving_occupant_frees_previous_room(admin_client, rooms):
    occupant = check_in(admin_client, rooms[0])

    response = admin_client.put(f"/hostel/occupants/{occupant['id']}", json={
        "room_id": rooms[2]["id"],
        "occupant_name": "Mary Teacher",
        "gender": "female",
    })

    assert response.status_code == 200
    assert room_status(admin_client, rooms[0]["id"]) == "available"
    assert room_status(admin_client, rooms[2]["id"]) == "occupied"


def test_stats_count_only_checked_in(admin_client, rooms):
    check_in(admin_client, rooms[0], gender="male", occupant_name="Tom")
    check_in(admin_client, rooms[1], gender="female", occupant_name="Sue")
    gone = check_in(admin_client, rooms[2], gender="male", occupant_name="Bob")
    admin_client.post(f"/hostel/occupants/{gone['id']}/checkout")

    stats = admin_client.get("/hostel/stats").get_json()

    assert stats == {
        "totalRooms": 3,
        "occupied": 2,
        "available": 1,
        "maleOccupants": 1,
        "femaleOccupants": 1,
    }


def test_occupant_filters(admin_client, rooms):
    check_in(admin_client, rooms[0], gender="male", occupant_name="Tom", subject_teaching="Maths")
    check_in(admin_client, rooms[1], gender="female", occupant_name="Sue", subject_teaching="Physics")

    def names(query):
        return sorted(o["occupant_name"] for o in admin_client.get(f"/hostel/occupants?{query}").get_json())

    assert names("gender=male") == ["Tom"]
    assert names("search=phys") == ["Sue"]
    assert names("status=checked_out") == []
    assert names("gender=all") == ["Sue", "Tom"]


def test_rooms_filtered_by_house(admin_client, rooms, house):
    other = admin_client.post(
        "/hostel/houses", json={"house_name": "Harmony House", "house_number": 2}
    ).get_json()
    admin_client.post("/hostel/rooms", json={"house_id": other["id"], "room_number": "201"})

    listed = admin_client.get(f"/hostel/rooms?house_id={house['id']}").get_json()

    assert sorted(r["room_number"] for r in listed) == ["101", "102", "103"]


def test_occupant_gender_must_be_male_or_female(admin_client, rooms):
    response = admin_client.post("/hostel/occupants", json={
        "room_id": rooms[0]["id"], "occupant_name": "X", "gender": "other"
    })
    assert response.status_code == 400

def test_medical_record_lifecycle(admin_client, make_student):
    student = make_student(full_name="Sick Student")

    created = admin_client.post("/medical", json={
        "student_id": student["id"], "illness_description": "Malaria"
    })
    record = created.get_json()
    assert created.status_code == 201
    assert record["status"] == "active"
    assert record["treatment_type"] == "in-school"
    assert record["student"]["full_name"] == "Sick Student"

    admin_client.post(f"/medical/{record['id']}/status", json={"status": "recovering"})
    groups = admin_client.get("/medical").get_json()
    assert [r["id"] for r in groups["recovering"]] == [record["id"]]
    assert groups["active"] == []

    discharged = admin_client.post(f"/medical/{record['id']}/discharge").get_json()
    assert discharged["status"] == "discharged"
    assert discharged["check_out_date"] is not None


def test_medical_status_validated(admin_client, make_student):
    student = make_student()
    record = admin_client.post("/medical", json={
        "student_id": student["id"], "illness_description": "Flu"
    }).get_json()

    response = admin_client.post(f"/medical/{record['id']}/status", json={"status": "cured"})
    assert response.status_code == 400


def test_material_status_follows_quantity(admin_client):
    item = admin_client.post("/materials", json={
        "material_name": "Gloves", "category": "Clinical", "location": "Store A", "quantity": 50
    }).get_json()
    assert item["status"] == "available"

    def set_quantity(quantity):
        return admin_client.post(f"/materials/{item['id']}/quantity", json={"quantity": quantity})

    assert set_quantity(9).get_json()["status"] == "low_stock"
    assert set_quantity(0).get_json()["status"] == "out_of_stock"
    assert set_quantity(10).get_json()["status"] == "available"
    assert set_quantity(-1).status_code == 400


def test_material_threshold_comes_from_config(app, admin_client):
    app.config["LOW_STOCK_THRESHOLD"] = 3
    item = admin_client.post("/materials", json={
        "material_name": "Masks", "category": "Clinical", "location": "Store A", "quantity": 5
    }).get_json()
    assert item["status"] == "available"

    response = admin_client.post(f"/materials/{item['id']}/quantity", json={"quantity": 2})
    assert response.get_json()["status"] == "low_stock"


def test_materials_sorted_by_name(admin_client):
    for name in ("Syringes", "Bandages"):
        admin_client.post("/materials", json={
            "material_name": name, "category": "Clinical", "location": "Store"
        })

    names = [m["material_name"] for m in admin_client.get("/materials").get_json()]
    assert names == ["Bandages", "Syringes"]


def test_practice_sessions_grouped_by_status(admin_client):
    created = admin_client.post("/practice", json={
        "session_name": "Hospital visit",
        "location": "General Hospital",
        "date": "2024-05-02",
        "start_time": "08:00",
        "end_time": "14:00",
        "students_attending": ["STU001", "STU002"],
    })
    session = created.get_json()
    assert created.status_code == 201
    assert session["status"] == "planned"

    admin_client.post(f"/practice/{session['id']}/status", json={"status": "completed"})

    groups = admin_client.get("/practice").get_json()
    assert groups["planned"] == []
    assert groups["completed"][0]["students_attending"] == ["STU001", "STU002"]


def test_rooms_crud(admin_client):
    room = admin_client.post("/rooms", json={
        "room_name": "LT1", "capacity": 120, "location": "Block A"
    }).get_json()
    assert room["status"] == "available"

    updated = admin_client.patch(f"/rooms/{room['id']}", json={"status": "occupied"}).get_json()
    assert updated["status"] == "occupied"
    assert updated["capacity"] == 120

    assert admin_client.delete(f"/rooms/{room['id']}").status_code == 204
    assert admin_client.get("/rooms").get_json() == []


def test_staff_search(admin_client):
    for staff_id, name, position in (("ST1", "Alice Grey", "Lecturer"), ("ST2", "Bob Stone", "Nurse")):
        response = admin_client.post("/staff", json={
            "staff_id": staff_id, "full_name": name, "position": position, "department": "Health"
        })
        assert response.status_code == 201

    assert [s["staff_id"] for s in admin_client.get("/staff?search=NURSE").get_json()] == ["ST2"]
    assert [s["staff_id"] for s in admin_client.get("/staff?search=st1").get_json()] == ["ST1"]
    assert len(admin_client.get("/staff").get_json()) == 2


def test_message_inbox(client, admin_client):
    sent = client.post("/messages", json={"sender_name": "Parent", "message": "When does term start?"})
    assert sent.status_code == 201
    message = sent.get_json()

    inbox = admin_client.get("/messages").get_json()
    assert [m["id"] for m in inbox["pending"]] == [message["id"]]

    answered = admin_client.post(
        f"/messages/{message['id']}/respond", json={"response": "Next Monday"}
    ).get_json()
    assert answered["status"] == "answered"

    inbox = admin_client.get("/messages").get_json()
    assert inbox["pending"] == []
    assert inbox["answered"][0]["response"] == "Next Monday"


def test_announcements_newest_first(admin_client):
    for title in ("First", "Second"):
        admin_client.post("/announcements", json={"title": title, "content": "..."})

    titles = [a["title"] for a in admin_client.get("/announcements").get_json()]
    assert titles == ["Second", "First"]

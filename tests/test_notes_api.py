def create_note(client, **fields):
    payload = {"title": "Check pump", "content": "Noisy bearing"}
    payload.update(fields)
    response = client.post("/notes", json=payload)
    assert response.status_code == 200
    return response.json()["id"]


def test_create_forces_incomplete_and_stamps_date(client):
    note_id = create_note(client, completed=True)

    notes = client.get("/notes").json()
    assert [n["id"] for n in notes] == [note_id]
    assert notes[0]["completed"] is False
    assert notes[0]["created_date"] == "2024-03-06"
    assert notes[0]["category"] == "General"
    assert notes[0]["priority"] == "medium"


def test_filter_combines_customer_completion_and_category(client):
    keep = create_note(client, customer_id="c", category="Equipment")
    create_note(client, customer_id="c", category="Billing")
    create_note(client, customer_id="d", category="Equipment")
    done = create_note(client, customer_id="c", category="Equipment")
    client.patch(f"/notes/{done}", json={"completed": True})

    notes = client.get(
        "/notes/filter", params={"customer_id": "c", "category": "Equipment", "completed": False}
    ).json()
    assert [n["id"] for n in notes] == [keep]


def test_summary_counts_active_and_completed(client):
    create_note(client)
    create_note(client)
    done = create_note(client)
    client.patch(f"/notes/{done}", json={"completed": True})

    assert client.get("/notes/summary").json() == {"active": 2, "completed": 1}


def test_summary_of_no_notes(client):
    assert client.get("/notes/summary").json() == {"active": 0, "completed": 0}


def test_by_customer_and_delete(client):
    note_id = create_note(client, customer_id="c", category="Customer")

    assert [n["id"] for n in client.get("/notes/by-customer/c").json()] == [note_id]
    assert client.delete(f"/notes/{note_id}").json() == {"message": "Note deleted"}
    assert client.get("/notes/by-customer/c").json() == []


def test_missing_note_is_not_found(client):
    response = client.patch("/notes/missing", json={"completed": True})
    assert response.status_code == 404
    assert response.json()["detail"] == "Note not found"


def test_null_for_required_field_is_rejected(client):
    note_id = create_note(client, customer_id="c")

    for field in ("title", "content", "category", "priority", "completed"):
        response = client.patch(f"/notes/{note_id}", json={field: None})
        assert response.status_code == 422, field

    assert client.patch(f"/notes/{note_id}", json={"customer_id": None}).status_code == 200
    notes = client.get("/notes").json()
    assert notes[0]["title"] == "Check pump"
    assert notes[0]["customer_id"] is None

from conftest import make_customer, make_log

NEW_CUSTOMER = {
    "full_name": "Jane Doe",
    "address": "12 Palm Ave",
    "phone": "555-0100",
    "service_day": "Monday",
    "pool_gallons": 15000,
    "pool_type": "Salt",
    "surface_type": "Plaster",
}


def test_create_and_get_customer(client):
    created = client.post("/customers", json=NEW_CUSTOMER)
    assert created.status_code == 200
    customer_id = created.json()["id"]

    fetched = client.get(f"/customers/{customer_id}")
    assert fetched.status_code == 200
    body = fetched.json()
    assert body["id"] == customer_id
    assert body["full_name"] == "Jane Doe"
    assert body["created_by"] == "tech@example.com"
    assert body["sort_order"] is None


def test_list_returns_only_callers_customers(client, db_session):
    make_customer(db_session, "Mine")
    make_customer(db_session, "Theirs", owner="other@example.com")

    names = [c["full_name"] for c in client.get("/customers").json()]
    assert names == ["Mine"]


def test_filter_defaults_owner_and_combines_predicates(client, db_session):
    make_customer(db_session, "Mon", "Monday")
    make_customer(db_session, "Tue", "Tuesday")
    make_customer(db_session, "Other Mon", "Monday", owner="other@example.com")

    mine = client.get("/customers/filter", params={"service_day": "Monday"}).json()
    assert [c["full_name"] for c in mine] == ["Mon"]

    theirs = client.get(
        "/customers/filter", params={"created_by": "other@example.com", "service_day": "Monday"}
    ).json()
    assert [c["full_name"] for c in theirs] == ["Other Mon"]


def test_update_applies_only_sent_fields(client, db_session):
    customer = make_customer(db_session, "Jane")

    response = client.patch(f"/customers/{customer.public_id}", json={"gate_code": "1234"})
    assert response.json() == {"id": customer.public_id}

    body = client.get(f"/customers/{customer.public_id}").json()
    assert body["gate_code"] == "1234"
    assert body["full_name"] == "Jane"
    assert body["service_day"] == "Monday"


def test_no_business_validation_on_values(client):
    payload = dict(NEW_CUSTOMER, pool_gallons=-50, service_day="Sunday")
    assert client.post("/customers", json=payload).status_code == 200


def test_missing_customer_is_not_found(client):
    for response in (
        client.get("/customers/nope"),
        client.patch("/customers/nope", json={"phone": "1"}),
        client.delete("/customers/nope"),
    ):
        assert response.status_code == 404
        assert response.json()["detail"] == "Customer not found"


def test_delete_does_not_cascade_to_logs(client, db_session):
    customer = make_customer(db_session, "Jane")
    make_log(db_session, customer.public_id, "2024-03-04")

    assert client.delete(f"/customers/{customer.public_id}").json() == {"message": "Customer deleted"}
    assert client.get(f"/customers/{customer.public_id}").status_code == 404

    logs = client.get(f"/service-logs/by-customer/{customer.public_id}").json()
    assert len(logs) == 1


def test_type_errors_are_still_rejected(client):
    payload = dict(NEW_CUSTOMER, pool_gallons="lots")
    assert client.post("/customers", json=payload).status_code == 422


def test_null_for_required_field_is_rejected(client, db_session):
    customer = make_customer(db_session, "Jane")

    for field in ("full_name", "address", "service_day", "pool_type", "surface_type"):
        response = client.patch(f"/customers/{customer.public_id}", json={field: None})
        assert response.status_code == 422, field
        assert response.json()["detail"][0]["loc"] == ["body", field]

    body = client.get(f"/customers/{customer.public_id}").json()
    assert body["full_name"] == "Jane"
    assert body["service_day"] == "Monday"


def test_null_clears_optional_field(client, db_session):
    customer = make_customer(db_session, "Jane")
    client.patch(f"/customers/{customer.public_id}", json={"gate_code": "1234"})

    response = client.patch(f"/customers/{customer.public_id}", json={"gate_code": None})

    assert response.status_code == 200
    assert client.get(f"/customers/{customer.public_id}").json()["gate_code"] is None


def test_other_owners_customer_is_not_found(client, db_session):
    other = make_customer(db_session, "Theirs", owner="other@example.com")

    for response in (
        client.get(f"/customers/{other.public_id}"),
        client.patch(f"/customers/{other.public_id}", json={"sort_order": 9}),
        client.delete(f"/customers/{other.public_id}"),
        client.get(f"/dashboard/customers/{other.public_id}"),
    ):
        assert response.status_code == 404

    db_session.expire_all()
    stored = db_session.get(type(other), other.id)
    assert stored is not None
    assert stored.sort_order is None

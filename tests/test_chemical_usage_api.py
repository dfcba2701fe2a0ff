from conftest import make_usage


def test_create_stamps_todays_date(client):
    response = client.post(
        "/chemical-usage",
        json={"customer_id": "c", "chemical_type": "Soda Ash", "quantity": "2 lbs"},
    )
    assert response.status_code == 200

    records = client.get("/chemical-usage/by-customer/c").json()
    assert records[0]["id"] == response.json()["id"]
    assert records[0]["created_date"] == "2024-03-06"


def test_client_supplied_created_date_is_ignored(client):
    client.post(
        "/chemical-usage",
        json={
            "customer_id": "c",
            "chemical_type": "Salt",
            "quantity": "4 bags",
            "created_date": "1999-01-01",
        },
    )
    assert client.get("/chemical-usage/by-customer/c").json()[0]["created_date"] == "2024-03-06"


def test_list_descending_flag_and_limit(client, db_session):
    make_usage(db_session, "c", "2024-03-01")
    make_usage(db_session, "c", "2024-03-05")
    make_usage(db_session, "c", "2024-02-10")

    desc = client.get("/chemical-usage", params={"order": "-created_date", "limit": 2}).json()
    assert [r["created_date"] for r in desc] == ["2024-03-05", "2024-03-01"]

    asc = client.get("/chemical-usage", params={"order": "-service_date"}).json()
    assert [r["created_date"] for r in asc] == ["2024-02-10", "2024-03-01", "2024-03-05"]


def test_filter_by_customer(client, db_session):
    make_usage(db_session, "a", "2024-03-01")
    make_usage(db_session, "b", "2024-03-01")

    records = client.get("/chemical-usage/filter", params={"customer_id": "b"}).json()
    assert [r["customer_id"] for r in records] == ["b"]


def test_update_and_delete(client, db_session):
    record = make_usage(db_session, "c", "2024-03-01")

    assert client.patch(f"/chemical-usage/{record.public_id}", json={"quantity": "3 gal"}).json() == {
        "id": record.public_id
    }
    updated = client.get("/chemical-usage/by-customer/c").json()[0]
    assert updated["quantity"] == "3 gal"
    assert updated["created_date"] == "2024-03-01"

    assert client.delete(f"/chemical-usage/{record.public_id}").json() == {
        "message": "Chemical usage deleted"
    }
    response = client.delete(f"/chemical-usage/{record.public_id}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Chemical usage not found"


def test_null_for_required_field_is_rejected(client, db_session):
    record = make_usage(db_session, "c", "2024-03-01")

    for field in ("customer_id", "chemical_type", "quantity"):
        response = client.patch(f"/chemical-usage/{record.public_id}", json={field: None})
        assert response.status_code == 422, field

    assert client.patch(f"/chemical-usage/{record.public_id}", json={"notes": None}).status_code == 200
    assert client.get("/chemical-usage/by-customer/c").json()[0]["quantity"] == "2 gal"

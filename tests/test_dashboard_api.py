from conftest import make_customer, make_log


def test_daily_route_for_wednesday(client, db_session):
    done = make_customer(db_session, "Done", "Wednesday", sort_order=1)
    todo = make_customer(db_session, "Todo", "Wednesday", sort_order=0)
    monday = make_customer(db_session, "Monday Pool", "Monday", sort_order=0)
    make_log(db_session, done.public_id, "2024-03-06")
    make_log(db_session, done.public_id, "2024-03-05")
    make_log(db_session, todo.public_id, "2024-02-28", ph="high")

    body = client.get("/dashboard/today").json()

    assert body["date"] == "2024-03-06"
    assert body["weekday"] == "Wednesday"
    assert [(s["customer"]["full_name"], s["completed"]) for s in body["stops"]] == [
        ("Todo", False),
        ("Done", True),
    ]
    assert body["stops"][0]["last_week_log"]["ph"] == "high"
    assert body["stops"][0]["action_url"] == f"/NewServiceLog?customerId={todo.public_id}"
    assert body["stops"][1]["action_url"] == f"/CustomerDetail?id={done.public_id}"
    assert body["stats"] == {"total": 2, "completed": 1, "pending": 1}
    assert [(m["customer"]["id"], m["scheduled_day"]) for m in body["missed"]] == [
        (monday.public_id, "Monday")
    ]


def test_monday_log_this_week_clears_missed(client, db_session):
    monday = make_customer(db_session, "Monday Pool", "Monday")
    make_log(db_session, monday.public_id, "2024-03-04")

    assert client.get("/dashboard/today").json()["missed"] == []


def test_customer_detail(client, db_session):
    customer = make_customer(db_session, "Jane", "Monday")
    make_log(db_session, customer.public_id, "2024-02-26", notes="last week")
    make_log(db_session, customer.public_id, "2024-03-04", notes="this week")

    body = client.get(f"/dashboard/customers/{customer.public_id}").json()

    assert body["customer"]["full_name"] == "Jane"
    assert [log["notes"] for log in body["logs"]] == ["this week", "last week"]
    assert body["last_week_log"]["notes"] == "last week"


def test_customer_detail_not_found(client):
    response = client.get("/dashboard/customers/missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Customer not found"


def test_history_groups_last_month_by_day(client, db_session):
    mon = make_customer(db_session, "Mon", "Monday")
    make_customer(db_session, "Quiet", "Monday")
    fri = make_customer(db_session, "Fri", "Friday")
    make_log(db_session, mon.public_id, "2024-03-04")
    make_log(db_session, mon.public_id, "2024-01-15")
    make_log(db_session, fri.public_id, "2024-02-09")

    history = client.get("/dashboard/history").json()

    assert list(history) == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert [h["customer"]["full_name"] for h in history["Monday"]] == ["Mon"]
    assert [log["service_date"] for log in history["Monday"][0]["logs"]] == ["2024-03-04"]
    assert history["Friday"][0]["logs"][0]["service_date"] == "2024-02-09"
    assert history["Tuesday"] == []

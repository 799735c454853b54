from library_loans.extensions import db
from library_loans.services import loan_service
from tests.conftest import add_loan


def test_active_loans_is_checked_out_subset(client):
    add_loan(1, "111", status="checked out")
    add_loan(1, "222", status="returned")
    add_loan(2, "111", status="overdue")
    add_loan(2, "333", status="checked out")

    all_loans = client.get("/api/v1/loans").get_json()
    active = client.get("/api/v1/loans/active").get_json()

    expected = [l for l in all_loans if l["status"] == "checked out"]
    assert sorted(active, key=lambda l: l["id_loan"]) == sorted(expected, key=lambda l: l["id_loan"])
    assert len(active) == 2


def test_active_loans_empty_when_none_checked_out(client):
    add_loan(1, "111", status="returned")

    r = client.get("/api/v1/loans/active")
    assert r.status_code == 200
    assert r.get_json() == []


def test_loans_by_user(client):
    add_loan(1, "111")
    add_loan(1, "222")
    add_loan(2, "111")

    r = client.get("/api/v1/loans/user/1")
    assert r.status_code == 200
    data = r.get_json()
    assert len(data) == 2
    assert all(l["id_user"] == 1 for l in data)


def test_loans_by_user_without_loans_is_empty_list(client):
    r = client.get("/api/v1/loans/user/42")
    assert r.status_code == 200
    assert r.get_json() == []


def test_loan_history_by_isbn(client):
    add_loan(1, "111", status="returned")
    add_loan(2, "111", status="checked out")
    add_loan(2, "222")

    r = client.get("/api/v1/loans/history/111")
    assert r.status_code == 200
    data = r.get_json()
    assert len(data) == 2
    assert {l["id_user"] for l in data} == {1, 2}


def test_service_get_by_id_returns_none_sentinel(app):
    assert loan_service.get_loan_by_id(db.session, 12345) is None
    assert loan_service.update_loan_by_id(db.session, 12345, {"loan_date": "2024-01-01"}) is None
    assert loan_service.delete_loan_by_id(db.session, 12345) is False


def test_parse_date_variants():
    from datetime import date

    assert loan_service.parse_date(None) is None
    assert loan_service.parse_date("") is None
    assert loan_service.parse_date("2024-03-05") == date(2024, 3, 5)
    assert loan_service.parse_date("2024-03-05T23:00:00Z") == date(2024, 3, 5)
    assert loan_service.parse_date(date(2024, 3, 5)) == date(2024, 3, 5)

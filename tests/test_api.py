from sqlalchemy.exc import OperationalError

from app.repositories.record_store import RecordStore
from tests.conftest import PASSWORD, register_and_login


def _post_income(client, headers, amount, date, title="Salario"):
    return client.post("/incomes", json={"title": title, "amount": amount, "date": date}, headers=headers)


def _post_expense(client, headers, amount, date, title="Arriendo"):
    return client.post("/expenses", json={"title": title, "amount": amount, "date": date}, headers=headers)


# Auth

def test_root(client):
    assert client.get("/").status_code == 200


def test_register_duplicate_username(client):
    register_and_login(client, "bob")

    response = client.post("/auth/register", json={"username": "bob", "password": PASSWORD})
    assert response.status_code == 400


def test_register_weak_password(client):
    response = client.post("/auth/register", json={"username": "bob", "password": "password"})
    assert response.status_code == 400


def test_login_wrong_password(client):
    register_and_login(client, "bob")

    response = client.post("/auth/login", data={"username": "bob", "password": "Wrong1234"})
    assert response.status_code == 401


def test_me(client, auth_headers):
    response = client.get("/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["username"] == "alice"


def test_protected_routes_require_token(client):
    assert client.get("/incomes").status_code == 401
    assert client.post("/analyses", json={"month": 1, "year": 2023}).status_code == 401
    assert client.get("/budget-plans/me", headers={"Authorization": "Bearer basura"}).status_code == 401


# Ingresos y gastos

def test_income_crud(client, auth_headers):
    response = _post_income(client, auth_headers, 100, "2023-01-05")
    assert response.status_code == 201
    income = response.json()
    assert income["title"] == "Salario"
    assert income["is_recurring"] is False

    response = client.put(
        f"/incomes/{income['id']}",
        json={"title": "Bono", "amount": 150, "date": "2023-01-06", "is_recurring": True},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["amount"] == 150
    assert response.json()["is_recurring"] is True

    assert client.get(f"/incomes/{income['id']}", headers=auth_headers).json()["title"] == "Bono"

    assert client.delete(f"/incomes/{income['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/incomes/{income['id']}", headers=auth_headers).status_code == 404


def test_income_validation(client, auth_headers):
    assert _post_income(client, auth_headers, 100, "2023-01-05", title="A").status_code == 400
    assert _post_income(client, auth_headers, 0, "2023-01-05").status_code == 400
    assert _post_expense(client, auth_headers, 10_000_001, "2023-01-05").status_code == 400


def test_list_expenses_filtered_by_month(client, auth_headers):
    _post_expense(client, auth_headers, 10, "2023-01-05")
    _post_expense(client, auth_headers, 20, "2023-02-05")

    response = client.get("/expenses", params={"year": 2023, "month": 2}, headers=auth_headers)

    assert response.status_code == 200
    assert [e["amount"] for e in response.json()] == [20]
    assert len(client.get("/expenses", headers=auth_headers).json()) == 2


def test_records_of_other_users_are_hidden(client, auth_headers):
    income_id = _post_income(client, auth_headers, 100, "2023-01-05").json()["id"]
    other_headers = register_and_login(client, "mallory")

    assert client.get(f"/incomes/{income_id}", headers=other_headers).status_code == 404
    assert client.delete(f"/incomes/{income_id}", headers=other_headers).status_code == 404
    assert client.get("/incomes", headers=other_headers).json() == []


# Análisis mensual

def test_create_and_fetch_month_analysis(client, auth_headers):
    _post_income(client, auth_headers, 100, "2023-01-05")
    _post_expense(client, auth_headers, 40, "2023-01-20")

    response = client.post("/analyses", json={"month": 1, "year": 2023}, headers=auth_headers)
    assert response.status_code == 201
    analysis = response.json()
    assert analysis["summary_amount"] == 60
    assert len(analysis["incomes"]) == 1
    assert len(analysis["expenses"]) == 1

    response = client.get(f"/analyses/{analysis['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["summary_amount"] == 60

    response = client.get("/analyses/by-month", params={"month": 1, "year": 2023}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == analysis["id"]


def test_month_analysis_is_recomputed(client, auth_headers):
    _post_income(client, auth_headers, 100, "2023-01-05")
    client.post("/analyses", json={"month": 1, "year": 2023}, headers=auth_headers)
    _post_expense(client, auth_headers, 25, "2023-01-07")

    response = client.post("/analyses", json={"month": 1, "year": 2023}, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["summary_amount"] == 75
    response = client.get("/analyses/by-month", params={"month": 1, "year": 2023}, headers=auth_headers)
    assert response.json()["summary_amount"] == 75


def test_month_analysis_without_data(client, auth_headers):
    response = client.post("/analyses", json={"month": 5, "year": 2023}, headers=auth_headers)
    assert response.status_code == 400

    response = client.get("/analyses/by-month", params={"month": 5, "year": 2023}, headers=auth_headers)
    assert response.status_code == 404


def test_month_analysis_rejects_invalid_month(client, auth_headers):
    response = client.post("/analyses", json={"month": 13, "year": 2023}, headers=auth_headers)
    assert response.status_code == 422


def test_month_analysis_of_other_user_is_forbidden(client, auth_headers):
    _post_income(client, auth_headers, 100, "2023-01-05")
    analysis_id = client.post("/analyses", json={"month": 1, "year": 2023}, headers=auth_headers).json()["id"]
    other_headers = register_and_login(client, "mallory")

    assert client.get(f"/analyses/{analysis_id}", headers=other_headers).status_code == 403
    assert client.get("/analyses/9999", headers=other_headers).status_code == 404


# Plan de presupuesto

def test_budget_plan_is_replaced(client, auth_headers):
    response = client.post(
        "/budget-plans",
        json={"summary_amount": -1000, "items": [{"title": "Rent", "amount": 1000, "is_income": False}]},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["items"][0]["title"] == "Rent"

    response = client.post(
        "/budget-plans",
        json={"summary_amount": 3000, "items": [{"title": "Salary", "amount": 3000, "is_income": True}]},
        headers=auth_headers,
    )
    assert response.status_code == 201

    plan = client.get("/budget-plans/me", headers=auth_headers).json()
    assert plan["summary_amount"] == 3000
    assert [(i["title"], i["amount"], i["is_income"]) for i in plan["items"]] == [("Salary", 3000, True)]
    assert client.get(f"/budget-plans/{plan['id']}", headers=auth_headers).status_code == 200


def test_budget_plan_validation_keeps_existing_plan(client, auth_headers):
    client.post(
        "/budget-plans",
        json={"items": [{"title": "Rent", "amount": 1000}]},
        headers=auth_headers,
    )

    response = client.post(
        "/budget-plans",
        json={"items": [{"title": "Salary", "amount": 3000, "is_income": True}, {"title": "X", "amount": 10}]},
        headers=auth_headers,
    )
    assert response.status_code == 400

    response = client.post("/budget-plans", json={"items": [{"title": "Gym", "amount": 0}]}, headers=auth_headers)
    assert response.status_code == 400

    plan = client.get("/budget-plans/me", headers=auth_headers).json()
    assert [i["title"] for i in plan["items"]] == ["Rent"]


def test_budget_plan_access(client, auth_headers):
    assert client.get("/budget-plans/me", headers=auth_headers).status_code == 404

    plan_id = client.post(
        "/budget-plans", json={"items": [{"title": "Rent", "amount": 1000}]}, headers=auth_headers
    ).json()["id"]
    other_headers = register_and_login(client, "mallory")

    assert client.get(f"/budget-plans/{plan_id}", headers=other_headers).status_code == 403
    assert client.get("/budget-plans/9999", headers=other_headers).status_code == 404


def test_database_errors_return_500(client, auth_headers, monkeypatch):
    def broken_commit(self):
        raise OperationalError("COMMIT", {}, Exception("base de datos caída"))

    monkeypatch.setattr(RecordStore, "commit", broken_commit)

    response = _post_income(client, auth_headers, 100, "2023-01-05")

    assert response.status_code == 500
    assert response.json() == {"detail": "Error interno del servidor"}

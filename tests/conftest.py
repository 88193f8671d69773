import datetime as dt

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import app.models  # noqa: F401
from app.database import get_session
from app.main import app
from app.models.expense import Expense
from app.models.income import Income
from app.models.user import User
from app.repositories.record_store import RecordStore

PASSWORD = "Password1"


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="store")
def store_fixture(session):
    return RecordStore(session)


def make_user(session: Session, username: str) -> User:
    user = User(username=username, hashed_password="not-a-real-hash")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="user")
def user_fixture(session):
    return make_user(session, "testuser1")


@pytest.fixture(name="other_user")
def other_user_fixture(session):
    return make_user(session, "testuser2")


def add_income(session: Session, user: User, amount: float, date: dt.date, title: str = "Salario") -> Income:
    income = Income(user_id=user.id, title=title, amount=amount, date=date)
    session.add(income)
    session.commit()
    session.refresh(income)
    return income


def add_expense(session: Session, user: User, amount: float, date: dt.date, title: str = "Mercado") -> Expense:
    expense = Expense(user_id=user.id, title=title, amount=amount, date=date)
    session.add(expense)
    session.commit()
    session.refresh(expense)
    return expense


@pytest.fixture(name="client")
def client_fixture(engine):
    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client: TestClient, username: str) -> dict:
    response = client.post("/auth/register", json={"username": username, "password": PASSWORD})
    assert response.status_code == 201, response.text
    response = client.post("/auth/login", data={"username": username, "password": PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(client):
    return register_and_login(client, "alice")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db_session import Base, get_db
from database.models import Customer, Invoice, Revenue, User
from api.auth import get_password_hash

PASSWORD = "secret1"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def broken_db():
    """A session on a database that has no tables at all."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    session = sessionmaker(bind=engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def seeded(db):
    customers = {
        "delba": Customer(name="Delba de Oliveira", email="delba@oliveira.com", image_url="/customers/delba.png"),
        "lee": Customer(name="Lee Robinson", email="lee@robinson.com", image_url="/customers/lee.png"),
        "hector": Customer(name="Hector Simpson", email="hector@simpson.com", image_url="/customers/hector.png"),
        "steph": Customer(name="Steph Dietz", email="steph@dietz.com", image_url="/customers/steph.png"),
    }
    db.add_all(customers.values())
    db.flush()

    rows = [
        ("delba", 15795, "pending", date(2022, 12, 6)),
        ("lee", 20348, "pending", date(2022, 11, 14)),
        ("hector", 3040, "paid", date(2022, 10, 29)),
        ("delba", 44800, "paid", date(2023, 9, 10)),
        ("lee", 34577, "pending", date(2023, 8, 5)),
        ("hector", 54246, "pending", date(2023, 7, 16)),
        ("delba", 666, "pending", date(2023, 6, 27)),
        ("lee", 32545, "paid", date(2023, 6, 9)),
    ]
    invoices = [
        Invoice(customer_id=customers[who].id, amount=amount, status=status, date=day)
        for who, amount, status, day in rows
    ]
    db.add_all(invoices)

    db.add_all(
        [
            Revenue(month="Mar", revenue=2200),
            Revenue(month="Jan", revenue=2000),
            Revenue(month="Feb", revenue=1800),
        ]
    )
    db.commit()
    return {"customers": customers, "invoices": invoices}


@pytest.fixture
def user(db):
    user = User(name="User", email="user@nextmail.com", password=get_password_hash(PASSWORD))
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def client(db):
    from api.gateway import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client, user):
    res = client.post("/auth/signin", json={"email": user.email, "password": PASSWORD})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['access_token']}"}

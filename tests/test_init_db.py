from api.auth import authorize
from database import placeholder_data
from database.models import Customer, Invoice, Revenue, User
from init_db import seed


def test_seed_loads_placeholder_data(db):
    assert seed(db) is True

    assert db.query(Customer).count() == len(placeholder_data.customers)
    assert db.query(Invoice).count() == len(placeholder_data.invoices) == 13
    assert db.query(Revenue).count() == 12
    assert db.query(User).count() == 1


def test_seeded_user_password_is_hashed(db):
    seed(db)

    user = db.query(User).filter(User.email == "user@nextmail.com").one()
    assert user.password != "123456"
    assert user.password.startswith("$2")
    assert authorize(db, {"email": "user@nextmail.com", "password": "123456"}).id == user.id
    assert authorize(db, {"email": "user@nextmail.com", "password": "1234567"}) is None


def test_seed_skips_database_with_customers(db):
    assert seed(db) is True
    assert seed(db) is False

    assert db.query(Invoice).count() == 13
    assert db.query(User).count() == 1


def test_seed_skips_when_customers_already_exist(db, seeded):
    assert seed(db) is False

    assert db.query(Invoice).count() == 8
    assert db.query(User).count() == 0

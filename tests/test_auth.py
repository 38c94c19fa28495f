import pytest

from api import auth
from database.models import User

PASSWORD = "secret1"


def test_authorize_with_correct_password(db, user):
    assert auth.authorize(db, {"email": user.email, "password": PASSWORD}).id == user.id


def test_authorize_with_wrong_password(db, user):
    assert auth.authorize(db, {"email": user.email, "password": "wrong-password"}) is None


def test_authorize_unknown_user(db, user):
    assert auth.authorize(db, {"email": "someone@nextmail.com", "password": PASSWORD}) is None


@pytest.mark.parametrize(
    "credentials",
    [
        {"email": "bad-format", "password": "123"},
        {"email": "user@nextmail.com", "password": "12345"},
        {"email": "bad-format", "password": PASSWORD},
        {"password": PASSWORD},
    ],
)
def test_authorize_rejects_malformed_credentials_before_lookup(db, user, monkeypatch, credentials):
    def fail_lookup(*args, **kwargs):
        raise AssertionError("user lookup should not happen")

    monkeypatch.setattr(auth, "get_user", fail_lookup)

    assert auth.authorize(db, credentials) is None


def test_plaintext_stored_password_never_matches(db):
    db.add(User(name="Legacy", email="legacy@nextmail.com", password="secret1"))
    db.commit()

    assert auth.authorize(db, {"email": "legacy@nextmail.com", "password": "secret1"}) is None


def test_password_hash_round_trip():
    hashed = auth.get_password_hash("123456")

    assert hashed != "123456"
    assert auth.verify_password("123456", hashed)
    assert not auth.verify_password("1234567", hashed)

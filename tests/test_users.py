from gradestore.models.user import User
from gradestore.schemas.user import UserBase
from gradestore.services.users import add_or_update_user, verify_login


def test_new_user_gets_an_id_and_can_log_in(db):
    user_id = add_or_update_user(db, UserBase(username="carol", firstname="Carol", lastname="Danvers"), "s3cret")

    assert user_id > 0
    assert verify_login(db, "carol", "s3cret") is True
    assert verify_login(db, "carol", "wrong") is False


def test_password_is_not_stored_in_plaintext(db):
    add_or_update_user(db, UserBase(username="carol"), "s3cret")

    stored = db.query(User).filter(User.username == "carol").one()
    assert stored.password != "s3cret"


def test_existing_username_is_updated_in_place(db):
    first = add_or_update_user(db, UserBase(username="dave", firstname="Dave", lastname="Old"), "one")
    second = add_or_update_user(db, UserBase(username="dave", firstname=" David ", lastname="New"), "two")

    assert first == second
    stored = db.get(User, first)
    assert stored.firstname == "David"
    assert stored.lastname == "New"
    assert verify_login(db, "dave", "two") is True
    assert verify_login(db, "dave", "one") is False
    assert db.query(User).count() == 1


def test_unknown_user_cannot_log_in(db):
    assert verify_login(db, "nobody", "anything") is False


def test_password_whitespace_is_ignored_on_both_paths(db):
    add_or_update_user(db, UserBase(username="erin"), "  padded  ")

    assert verify_login(db, "erin", "  padded  ") is True
    assert verify_login(db, "erin", "padded") is True

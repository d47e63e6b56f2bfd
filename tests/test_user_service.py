"""Unit tests for user_service module."""

import pytest

from lar.models.user import User
from lar.services import home_service, user_service


@pytest.mark.unit
class TestGetUser:
    def test_missing_user_returns_none(self, db):
        assert user_service.get_user(db, "nobody") is None

    def test_existing_user(self, db, make_user):
        make_user("ana")
        user = user_service.get_user(db, "ana")
        assert user is not None
        assert user.email == "ana@example.com"


@pytest.mark.unit
class TestUpsertUser:
    def test_insert_defaults(self, db):
        user = user_service.upsert_user(db, id="u1", email="u1@example.com", first_name="Ana")

        assert user.points == 0
        assert user.home_id is None
        assert user.first_name == "Ana"
        assert user.created_at is not None

    def test_merge_keeps_fields_not_given(self, db, make_user):
        """Partial upsert only touches the fields it was given."""
        make_user("u1", first_name="Ana", last_name="Silva")

        user = user_service.upsert_user(db, id="u1", first_name="Joana")

        assert user.first_name == "Joana"
        assert user.last_name == "Silva"
        assert db.query(User).count() == 1

    def test_refreshes_updated_at(self, db, make_user):
        before = make_user("u1").updated_at

        after = user_service.upsert_user(db, id="u1", first_name="Ana").updated_at

        assert after >= before

    def test_rejects_unknown_fields(self, db):
        with pytest.raises(ValueError):
            user_service.upsert_user(db, id="u1", points=100)


@pytest.mark.unit
class TestUpdateUserPoints:
    def test_increments_relative_to_stored_value(self, db, make_user):
        make_user("u1")

        user_service.update_user_points(db, "u1", 10)
        user = user_service.update_user_points(db, "u1", 5)

        assert user.points == 15

    def test_missing_user_returns_none(self, db):
        assert user_service.update_user_points(db, "ghost", 5) is None

    def test_negative_delta_rejected(self, db, make_user):
        make_user("u1")

        with pytest.raises(ValueError):
            user_service.update_user_points(db, "u1", -3)

        assert user_service.get_user(db, "u1").points == 0


@pytest.mark.unit
class TestHomeRanking:
    def test_sorted_by_points_descending(self, db, make_user):
        make_user("a")
        make_user("b")
        make_user("c")
        home = home_service.create_home(db, name="Silva", created_by="a")
        home_service.join_home(db, user_id="b", home_id=home.id)
        home_service.join_home(db, user_id="c", home_id=home.id)
        user_service.update_user_points(db, "b", 20)
        user_service.update_user_points(db, "c", 10)

        ranking = user_service.get_home_ranking(db, home.id)

        assert [u.id for u in ranking] == ["b", "c", "a"]

    def test_ties_ordered_by_account_creation(self, db, make_user):
        """Equal totals keep the earliest-created user first, every time."""
        make_user("zed")
        make_user("amy")
        home = home_service.create_home(db, name="Silva", created_by="zed")
        home_service.join_home(db, user_id="amy", home_id=home.id)

        first = [u.id for u in user_service.get_home_ranking(db, home.id)]
        second = [u.id for u in user_service.get_home_ranking(db, home.id)]

        assert first == ["zed", "amy"]
        assert first == second

    def test_ties_ignore_join_order(self, db, make_user):
        """A user created earlier still ranks first after joining later."""
        make_user("early")
        make_user("host")
        home = home_service.create_home(db, name="Silva", created_by="host")
        home_service.join_home(db, user_id="early", home_id=home.id)

        ranking = user_service.get_home_ranking(db, home.id)

        assert [u.id for u in ranking] == ["early", "host"]

    def test_only_members_of_the_home(self, db, make_user):
        make_user("a")
        make_user("outsider")
        home = home_service.create_home(db, name="Silva", created_by="a")

        assert [u.id for u in user_service.get_home_ranking(db, home.id)] == ["a"]

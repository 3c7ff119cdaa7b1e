"""Tests for serializable_hash(), value_for(), key_for() and conditions."""

from types import SimpleNamespace

import pytest

from exposure_engine.entity import Entity


@pytest.fixture
def user_entity(fresh_entity):
    """Entity exposing name/email, nested friends and a computed value."""
    fresh_entity.expose("name", "email")
    fresh_entity.expose("friends", using=fresh_entity)
    fresh_entity.expose("computed", compute=lambda obj, opts: opts.get("awesome"))
    return fresh_entity


class TestSerializableHash:
    def test_none_options_do_not_raise(self, fresh_entity, model):
        fresh_entity(model).serializable_hash(None)

    def test_none_object_does_not_raise(self, fresh_entity):
        fresh_entity.expose("name")
        assert fresh_entity(None).serializable_hash() == {"name": None}

    def test_none_object_with_nested_exposure(self, user_entity):
        result = user_entity(None).serializable_hash()
        assert result == {"name": None, "email": None, "friends": None, "computed": None}

    def test_missing_attribute_is_none(self, fresh_entity):
        fresh_entity.expose("name", "nickname")
        result = fresh_entity(SimpleNamespace(name="Bob")).serializable_hash()
        assert result == {"name": "Bob", "nickname": None}

    def test_keys_in_registration_order(self, user_entity, model):
        result = user_entity(model).serializable_hash()
        assert list(result) == ["name", "email", "friends", "computed"]

    def test_full_representation(self, user_entity, model):
        result = user_entity(model, {"awesome": 123}).serializable_hash()
        assert result["name"] == "Bob Bobson"
        assert result["email"] == "bob@example.com"
        assert result["computed"] == 123
        assert result["friends"] == [
            {"name": "Friend 1", "email": "friend1@example.com", "friends": [], "computed": 123},
            {"name": "Friend 2", "email": "friend2@example.com", "friends": [], "computed": 123},
        ]

    def test_override_options_replace_stored_options(self, fresh_entity, model):
        fresh_entity.expose("email", if_={"admin": True})
        fresh_entity.expose("flags", compute=lambda obj, opts: sorted(opts))
        entity = fresh_entity(model, {"admin": True, "stored": True})

        assert entity.serializable_hash() == {"email": "bob@example.com", "flags": ["admin", "stored"]}
        assert entity.serializable_hash({"other": 1}) == {"flags": ["other"]}

    def test_alias_used_as_output_key(self, fresh_entity, model):
        fresh_entity.expose("name", as_="nombre")
        assert fresh_entity(model).serializable_hash() == {"nombre": "Bob Bobson"}

    def test_conditional_exposures_skipped(self, fresh_entity, model):
        fresh_entity.expose("name")
        fresh_entity.expose("email", if_={"admin": True})
        fresh_entity.expose("friends", unless=lambda obj, opts: True)

        assert fresh_entity(model).serializable_hash() == {"name": "Bob Bobson"}
        assert fresh_entity(model, {"admin": True}).serializable_hash() == {
            "name": "Bob Bobson",
            "email": "bob@example.com",
        }

    def test_does_not_mutate_entity_or_object(self, user_entity, model):
        entity = user_entity(model, {"awesome": 1})
        entity.serializable_hash()
        assert entity.options == {"awesome": 1}
        assert model.name == "Bob Bobson"
        assert len(model.friends) == 2

    def test_mapping_objects(self, fresh_entity):
        fresh_entity.expose("name", "email")
        result = fresh_entity({"name": "Ann"}).serializable_hash()
        assert result == {"name": "Ann", "email": None}

    def test_metadata_does_not_change_output(self, fresh_entity, model):
        fresh_entity.expose("name", documentation={"type": "string"})
        assert fresh_entity(model).serializable_hash() == {"name": "Bob Bobson"}


class TestValueFor:
    def test_passes_through_bare_attributes(self, user_entity, model):
        assert user_entity(model).value_for("name") == "Bob Bobson"

    def test_nested_collection_is_serialized(self, user_entity, model):
        friends = user_entity(model).value_for("friends")
        assert len(friends) == 2
        assert friends[0]["name"] == "Friend 1"
        assert friends[1]["name"] == "Friend 2"

    def test_nested_collection_elements_carry_collection_flag(self, fresh_entity, model):
        class FriendEntity(Entity):
            pass

        FriendEntity.expose("in_collection", compute=lambda obj, opts: opts.get("collection"))
        fresh_entity.expose("friends", using=FriendEntity)

        friends = fresh_entity(model).value_for("friends")
        assert friends == [{"in_collection": True}, {"in_collection": True}]

    def test_nested_single_object_is_serialized(self, fresh_entity, friends):
        class FriendEntity(Entity):
            pass

        FriendEntity.expose("name")
        fresh_entity.expose("best_friend", using=FriendEntity)

        owner = SimpleNamespace(best_friend=friends[0])
        assert fresh_entity(owner).value_for("best_friend") == {"name": "Friend 1"}

    def test_nested_receives_options(self, fresh_entity, friends):
        class FriendEntity(Entity):
            pass

        FriendEntity.expose("email", if_={"admin": True})
        fresh_entity.expose("best_friend", using=FriendEntity)
        owner = SimpleNamespace(best_friend=friends[0])

        assert fresh_entity(owner).value_for("best_friend") == {}
        assert fresh_entity(owner, {"admin": True}).value_for("best_friend") == {
            "email": "friend1@example.com",
        }

    def test_calls_through_to_compute(self, user_entity, model):
        assert user_entity(model).value_for("computed", {"awesome": 123}) == 123

    def test_compute_receives_object_and_options(self, fresh_entity, model):
        fresh_entity.expose("pair", compute=lambda obj, opts: (obj, opts))
        assert fresh_entity(model, {"a": 1}).value_for("pair") == (model, {"a": 1})

    def test_compute_result_is_not_nested(self, fresh_entity, friends):
        fresh_entity.expose("friends", using=fresh_entity, compute=lambda obj, opts: friends)
        assert fresh_entity(None).value_for("friends") is friends

    def test_raw_values_are_not_recursed_without_using(self, fresh_entity, model):
        fresh_entity.expose("friends")
        assert fresh_entity(model).value_for("friends") is model.friends

    def test_undeclared_attribute(self, fresh_entity, model):
        with pytest.raises(KeyError):
            fresh_entity(model).value_for("missing")


class TestKeyFor:
    def test_returns_attribute_without_alias(self, fresh_entity, model):
        fresh_entity.expose("name")
        assert fresh_entity(model).key_for("name") == "name"

    def test_returns_alias(self, fresh_entity, model):
        fresh_entity.expose("name", as_="nombre")
        assert fresh_entity(model).key_for("name") == "nombre"


class TestConditionsMet:
    def test_uses_stored_options_by_default(self, fresh_entity, model):
        fresh_entity.expose("email", if_={"admin": True})
        assert fresh_entity(model, {"admin": True}).conditions_met("email")
        assert not fresh_entity(model).conditions_met("email")

    def test_predicate_sees_wrapped_object(self, fresh_entity, model):
        fresh_entity.expose("email", if_=lambda obj, opts: obj.name.startswith("Bob"))
        assert fresh_entity(model).conditions_met("email", {})


class TestInheritedRepresentation:
    def test_child_extends_and_overrides_output(self, model):
        class UserEntity(Entity):
            pass

        UserEntity.expose("name", "email")

        class AdminEntity(UserEntity):
            pass

        AdminEntity.expose("role", compute=lambda obj, opts: "admin")
        AdminEntity.expose("name", as_="login")

        assert AdminEntity(model).serializable_hash() == {
            "login": "Bob Bobson",
            "email": "bob@example.com",
            "role": "admin",
        }
        assert UserEntity(model).serializable_hash() == {
            "name": "Bob Bobson",
            "email": "bob@example.com",
        }

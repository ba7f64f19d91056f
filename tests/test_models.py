"""Tests for mapping JSON bodies onto model objects."""

import pytest
from pydantic import ValidationError

from royale_api.models import (
    Arena,
    Badges,
    Clan,
    ClanHistory,
    Constants,
    Endpoints,
    Profile,
    parse_many,
    parse_one,
)


def test_nested_objects_and_lists():
    body = """
    {
        "tag": "2CCCP",
        "name": "Alpha",
        "memberCount": 2,
        "badge": {"name": "A_Char_Rocket_02", "id": 16000101},
        "location": {"name": "Europe", "isCountry": false, "code": "EU"},
        "members": [
            {"tag": "AAA", "name": "One", "trophies": 5000},
            {"tag": "BBB", "name": "Two", "arena": {"arenaID": 12}}
        ]
    }
    """
    clan = parse_one(Clan, body)
    assert clan.member_count == 2
    assert clan.badge.id == 16000101
    assert clan.location.is_country is False
    assert [member.tag for member in clan.members] == ["AAA", "BBB"]
    assert clan.members[1].arena.arena_id == 12
    assert clan.tracking is None


def test_unknown_keys_are_ignored_and_missing_keep_defaults():
    profile = Profile.model_validate({"name": "Bob", "somethingNew": 1})
    assert profile.name == "Bob"
    assert profile.cards == []
    assert profile.arena is None


def test_profile_deck():
    profile = Profile.model_validate(
        {"currentDeck": [{"key": "zap", "elixir": 2}], "stats": {"favoriteCard": {"key": "zap"}}}
    )
    assert profile.current_deck[0].elixir == 2
    assert profile.stats.favorite_card.key == "zap"


def test_parse_many_requires_array():
    with pytest.raises(ValidationError):
        parse_many(Clan, "{}")


def test_nested_value_with_wrong_shape():
    with pytest.raises(ValidationError):
        Clan.model_validate({"badge": "not an object"})


def test_constants_aggregate():
    constants = Constants.model_validate(
        {
            "arenas": [{"arena": "Arena 1", "trophyLimit": 400}],
            "chestCycle": {"order": ["Silver", "Gold"]},
            "countryCodes": [{"key": "FR", "isCountry": True}],
        }
    )
    assert constants.arenas[0].trophy_limit == 400
    assert constants.chest_cycle.order == ["Silver", "Gold"]
    assert constants.country_codes[0].key == "FR"
    assert constants.cards == []


def test_badges_are_keyed_by_name():
    badges = Badges.model_validate({"Flame_01": {"id": 1}, "Sword_02": {"id": 2}})
    assert badges.badges["Sword_02"].id == 2


def test_endpoints_from_array():
    endpoints = parse_one(Endpoints, '["http://api.cr-api.com/clan/:tag"]')
    assert endpoints.urls == ["http://api.cr-api.com/clan/:tag"]
    with pytest.raises(ValidationError):
        Endpoints.model_validate({})


def test_fields_can_be_set_by_python_name():
    arena = Arena(arena_id=3, trophy_limit=800)
    assert arena.model_dump(by_alias=True)["arenaID"] == 3
    assert arena.model_dump(by_alias=True)["trophyLimit"] == 800


def test_malformed_json_is_a_validation_error():
    with pytest.raises(ValidationError):
        parse_one(Profile, '{"name": ')


def test_clan_history_keyed_by_date():
    history = parse_one(ClanHistory, '{"20171102": {"memberCount": 48, "score": 40000}}')
    assert history.snapshots["20171102"].member_count == 48

"""Tests for request values and their builders."""

import dataclasses

import pytest

from royale_api.request import (
    ClanBattlesRequest,
    ClanHistoryRequest,
    ClanRequest,
    ClanSearchRequest,
    ClansRequest,
    ProfileRequest,
    ProfilesRequest,
    TopClansRequest,
    TopPlayersRequest,
    TournamentsRequest,
)
from royale_api.validation import InvalidArgumentError, MissingArgumentError

TAG_REQUESTS = [
    ProfileRequest,
    ClanRequest,
    ClanBattlesRequest,
    ClanHistoryRequest,
    TournamentsRequest,
]
TAGS_REQUESTS = [ProfilesRequest, ClansRequest]
LOCATION_REQUESTS = [TopClansRequest, TopPlayersRequest]


class TestTagRequests:
    @pytest.mark.parametrize("request_type", TAG_REQUESTS)
    def test_build_fails_without_tag(self, request_type):
        with pytest.raises(MissingArgumentError):
            request_type.builder().build()

    @pytest.mark.parametrize("request_type", TAG_REQUESTS)
    def test_build_fails_with_empty_tag(self, request_type):
        with pytest.raises(InvalidArgumentError) as excinfo:
            request_type.builder().tag("").build()
        assert not isinstance(excinfo.value, MissingArgumentError)

    @pytest.mark.parametrize("request_type", TAG_REQUESTS)
    def test_build_keeps_tag(self, request_type):
        request = request_type.builder().tag("xyz").build()
        assert isinstance(request, request_type)
        assert request.tag == "xyz"

    def test_builder_class(self):
        assert type(ClanRequest.builder()).__name__ == "ClanRequestBuilder"
        assert type(ProfileRequest.builder()).__name__ == "ProfileRequestBuilder"


class TestTagsRequests:
    @pytest.mark.parametrize("request_type", TAGS_REQUESTS)
    def test_build_fails_without_tags(self, request_type):
        with pytest.raises(InvalidArgumentError):
            request_type.builder().build()

    @pytest.mark.parametrize("request_type", TAGS_REQUESTS)
    def test_build_fails_with_empty_tags(self, request_type):
        with pytest.raises(InvalidArgumentError):
            request_type.builder().tags([]).build()

    def test_tags_are_copied(self):
        tags = ["xyz", "def"]
        request = ProfilesRequest.builder().tags(tags).build()
        tags.append("ghi")
        assert request.tags == ("xyz", "def")

    @pytest.mark.parametrize("request_type", TAGS_REQUESTS)
    def test_build_rejects_bare_string_tags(self, request_type):
        with pytest.raises(InvalidArgumentError):
            request_type.builder().tags("xyz").build()

    def test_build_accepts_generator_tags(self):
        request = ClansRequest.builder().tags(tag for tag in ["xyz", "def"]).build()
        assert request.tags == ("xyz", "def")

    def test_build_rejects_empty_generator_tags(self):
        with pytest.raises(InvalidArgumentError):
            ClansRequest.builder().tags(tag for tag in []).build()


class TestLocationRequests:
    def test_builder_class(self):
        assert type(TopClansRequest.builder()).__name__ == "TopClansRequestBuilder"

    @pytest.mark.parametrize("request_type", LOCATION_REQUESTS)
    def test_location_key(self, request_type):
        assert request_type.builder().location_key("abc").build().location_key == "abc"

    @pytest.mark.parametrize("request_type", LOCATION_REQUESTS)
    def test_location_key_is_optional(self, request_type):
        assert request_type.builder().build().location_key is None


class TestQueryParameters:
    @pytest.mark.parametrize(
        "builder",
        [
            ProfileRequest.builder().tag("xyz"),
            ProfilesRequest.builder().tags(["xyz"]),
            ClanRequest.builder().tag("xyz"),
            TopClansRequest.builder(),
            ClanSearchRequest.builder(),
        ],
    )
    def test_empty_without_keys_and_excludes(self, builder):
        assert builder.build().query_parameters() == {}

    def test_keys_only(self):
        request = ClanRequest.builder().tag("xyz").keys(["a", "b"]).build()
        assert request.query_parameters() == {"keys": "a,b"}

    def test_excludes_only(self):
        request = ClanRequest.builder().tag("xyz").excludes(["x"]).build()
        assert request.query_parameters() == {"excludes": "x"}

    def test_keys_come_before_excludes(self):
        request = (
            TopClansRequest.builder().excludes(["x", "y"]).keys(["a", "b"]).build()
        )
        assert list(request.query_parameters().items()) == [
            ("keys", "a,b"),
            ("excludes", "x,y"),
        ]

    def test_duplicates_and_order_are_preserved(self):
        request = ClanRequest.builder().tag("xyz").keys(["b", "a", "b"]).build()
        assert request.query_parameters() == {"keys": "b,a,b"}

    def test_commas_inside_items_are_not_escaped(self):
        request = ClanRequest.builder().tag("xyz").keys(["a,b", "c"]).build()
        assert request.query_parameters() == {"keys": "a,b,c"}

    @pytest.mark.parametrize("setter", ["keys", "excludes"])
    def test_bare_string_filter_is_rejected(self, setter):
        builder = getattr(ClanRequest.builder().tag("xyz"), setter)("name")
        with pytest.raises(InvalidArgumentError):
            builder.build()

    def test_limit_comes_first(self):
        request = (
            ProfileRequest.builder()
            .keys(["a", "b"])
            .excludes(["x", "y"])
            .tag("xyz")
            .limit(15)
            .build()
        )
        assert list(request.query_parameters()) == ["limit", "keys", "excludes"]
        assert request.query_parameters()["limit"] == "15"

    def test_zero_limit_is_omitted(self):
        request = ProfilesRequest.builder().tags(["xyz"]).limit(0).build()
        assert "limit" not in request.query_parameters()

    def test_search_parameters(self):
        request = (
            ClanSearchRequest.builder()
            .keys(["tag"])
            .name("abc")
            .score(2000)
            .min_members(20)
            .max_members(50)
            .build()
        )
        assert list(request.query_parameters().items()) == [
            ("name", "abc"),
            ("score", "2000"),
            ("minMembers", "20"),
            ("maxMembers", "50"),
            ("keys", "tag"),
        ]

    def test_search_skips_unset_filters(self):
        request = ClanSearchRequest.builder().name("").score(0).max_members(40).build()
        assert request.query_parameters() == {"maxMembers": "40"}

    def test_reading_twice_gives_same_mapping(self):
        request = ProfileRequest.builder().tag("xyz").keys(["a"]).excludes(["b"]).build()
        first = request.query_parameters()
        first["keys"] = "changed"
        assert request.query_parameters() == {"keys": "a", "excludes": "b"}


class TestImmutability:
    def test_request_is_frozen(self):
        request = ClanRequest.builder().tag("xyz").build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.tag = "abc"

    def test_keys_are_copied_from_builder(self):
        keys = ["a"]
        builder = ClanRequest.builder().tag("xyz").keys(keys)
        request = builder.build()
        keys.append("b")
        builder.excludes(["x"])
        assert request.keys == ("a",)
        assert request.excludes == ()

    def test_builder_methods_chain(self):
        builder = ProfileRequest.builder()
        assert builder.tag("xyz") is builder
        assert builder.keys(["a"]) is builder
        assert builder.excludes(["b"]) is builder
        assert builder.limit(3) is builder

"""Request values and their fluent builders.

A request carries everything an API call needs besides the endpoint itself:
path identifiers (tags, location keys) and query parameters. Requests are
immutable and only created through a builder::

    request = (
        ProfileRequest.builder()
        .tag("2CCCP")
        .limit(15)
        .keys(["name", "trophies"])
        .build()
    )
    request.query_parameters()
    # {'limit': '15', 'keys': 'name,trophies'}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, Optional, Tuple, Type, TypeVar

from .validation import check_not_empty, check_not_string, check_string

R = TypeVar("R", bound="Request")


@dataclass(frozen=True)
class Request:
    """Base request holding the optional ``keys``/``excludes`` field filters."""

    keys: Tuple[str, ...] = ()
    excludes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        check_not_string(self.keys, "keys")
        check_not_string(self.excludes, "excludes")
        object.__setattr__(self, "keys", tuple(self.keys or ()))
        object.__setattr__(self, "excludes", tuple(self.excludes or ()))

    def query_parameters(self) -> Dict[str, str]:
        """Return the query parameters of this request in emission order.

        ``keys`` comes before ``excludes``; each is left out when empty.
        """

        params: Dict[str, str] = {}
        if self.keys:
            params["keys"] = ",".join(self.keys)
        if self.excludes:
            params["excludes"] = ",".join(self.excludes)
        return params


def _with_limit(limit: int, params: Dict[str, str]) -> Dict[str, str]:
    if limit <= 0:
        return params
    limited = {"limit": str(limit)}
    limited.update(params)
    return limited


@dataclass(frozen=True)
class TagRequest(Request):
    """Request scoped to a single player, clan or tournament tag."""

    tag: Optional[str] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        check_string(self.tag, "tag")


@dataclass(frozen=True)
class TagsRequest(Request):
    """Request scoped to several tags fetched in one call."""

    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        check_not_string(self.tags, "tags")
        tags = tuple(self.tags) if self.tags is not None else ()
        object.__setattr__(self, "tags", check_not_empty(tags, "tags"))


@dataclass(frozen=True)
class LocationRequest(Request):
    """Leaderboard request, optionally narrowed to a location key."""

    location_key: Optional[str] = None


@dataclass(frozen=True)
class ProfileRequest(TagRequest):
    limit: int = 0

    @classmethod
    def builder(cls) -> "ProfileRequestBuilder":
        return ProfileRequestBuilder()

    def query_parameters(self) -> Dict[str, str]:
        return _with_limit(self.limit, super().query_parameters())


@dataclass(frozen=True)
class ProfilesRequest(TagsRequest):
    limit: int = 0

    @classmethod
    def builder(cls) -> "ProfilesRequestBuilder":
        return ProfilesRequestBuilder()

    def query_parameters(self) -> Dict[str, str]:
        return _with_limit(self.limit, super().query_parameters())


@dataclass(frozen=True)
class ClanRequest(TagRequest):
    @classmethod
    def builder(cls) -> "ClanRequestBuilder":
        return ClanRequestBuilder()


@dataclass(frozen=True)
class ClansRequest(TagsRequest):
    @classmethod
    def builder(cls) -> "ClansRequestBuilder":
        return ClansRequestBuilder()


@dataclass(frozen=True)
class ClanBattlesRequest(TagRequest):
    @classmethod
    def builder(cls) -> "ClanBattlesRequestBuilder":
        return ClanBattlesRequestBuilder()


@dataclass(frozen=True)
class ClanHistoryRequest(TagRequest):
    @classmethod
    def builder(cls) -> "ClanHistoryRequestBuilder":
        return ClanHistoryRequestBuilder()


@dataclass(frozen=True)
class TournamentsRequest(TagRequest):
    @classmethod
    def builder(cls) -> "TournamentsRequestBuilder":
        return TournamentsRequestBuilder()


@dataclass(frozen=True)
class TopClansRequest(LocationRequest):
    @classmethod
    def builder(cls) -> "TopClansRequestBuilder":
        return TopClansRequestBuilder()


@dataclass(frozen=True)
class TopPlayersRequest(LocationRequest):
    @classmethod
    def builder(cls) -> "TopPlayersRequestBuilder":
        return TopPlayersRequestBuilder()


@dataclass(frozen=True)
class ClanSearchRequest(Request):
    """Clan search filters.

    Each filter becomes its own query parameter. Unset filters, empty names
    and zero numbers are not sent.
    """

    name: Optional[str] = None
    score: Optional[int] = None
    min_members: Optional[int] = None
    max_members: Optional[int] = None

    @classmethod
    def builder(cls) -> "ClanSearchRequestBuilder":
        return ClanSearchRequestBuilder()

    def query_parameters(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.name:
            params["name"] = self.name
        for key, value in (
            ("score", self.score),
            ("minMembers", self.min_members),
            ("maxMembers", self.max_members),
        ):
            if value:
                params[key] = str(value)
        params.update(super().query_parameters())
        return params


class RequestBuilder(Generic[R]):
    """Mutable staging area for a request.

    Setters return the builder so calls can be chained; :meth:`build`
    validates the staged values and returns the immutable request.
    """

    request_class: Type[R]

    def __init__(self) -> None:
        self._keys: Optional[Iterable[str]] = None
        self._excludes: Optional[Iterable[str]] = None

    def keys(self, keys: Optional[Iterable[str]]):
        self._keys = keys
        return self

    def excludes(self, excludes: Optional[Iterable[str]]):
        self._excludes = excludes
        return self

    def _fields(self) -> Dict[str, Any]:
        return {"keys": self._keys, "excludes": self._excludes}

    def build(self) -> R:
        return self.request_class(**self._fields())


class TagRequestBuilder(RequestBuilder[R]):
    def __init__(self) -> None:
        super().__init__()
        self._tag: Optional[str] = None

    def tag(self, tag: Optional[str]):
        self._tag = tag
        return self

    def _fields(self) -> Dict[str, Any]:
        fields = super()._fields()
        fields["tag"] = self._tag
        return fields


class TagsRequestBuilder(RequestBuilder[R]):
    def __init__(self) -> None:
        super().__init__()
        self._tags: Optional[Iterable[str]] = None

    def tags(self, tags: Optional[Iterable[str]]):
        self._tags = tags
        return self

    def _fields(self) -> Dict[str, Any]:
        fields = super()._fields()
        fields["tags"] = self._tags
        return fields


class LocationRequestBuilder(RequestBuilder[R]):
    def __init__(self) -> None:
        super().__init__()
        self._location_key: Optional[str] = None

    def location_key(self, location_key: Optional[str]):
        self._location_key = location_key
        return self

    def _fields(self) -> Dict[str, Any]:
        fields = super()._fields()
        fields["location_key"] = self._location_key
        return fields


class ProfileRequestBuilder(TagRequestBuilder[ProfileRequest]):
    request_class = ProfileRequest

    def __init__(self) -> None:
        super().__init__()
        self._limit = 0

    def limit(self, limit: int) -> "ProfileRequestBuilder":
        self._limit = limit
        return self

    def _fields(self) -> Dict[str, Any]:
        fields = super()._fields()
        fields["limit"] = self._limit
        return fields


class ProfilesRequestBuilder(TagsRequestBuilder[ProfilesRequest]):
    request_class = ProfilesRequest

    def __init__(self) -> None:
        super().__init__()
        self._limit = 0

    def limit(self, limit: int) -> "ProfilesRequestBuilder":
        self._limit = limit
        return self

    def _fields(self) -> Dict[str, Any]:
        fields = super()._fields()
        fields["limit"] = self._limit
        return fields


class ClanRequestBuilder(TagRequestBuilder[ClanRequest]):
    request_class = ClanRequest


class ClansRequestBuilder(TagsRequestBuilder[ClansRequest]):
    request_class = ClansRequest


class ClanBattlesRequestBuilder(TagRequestBuilder[ClanBattlesRequest]):
    request_class = ClanBattlesRequest


class ClanHistoryRequestBuilder(TagRequestBuilder[ClanHistoryRequest]):
    request_class = ClanHistoryRequest


class TournamentsRequestBuilder(TagRequestBuilder[TournamentsRequest]):
    request_class = TournamentsRequest


class TopClansRequestBuilder(LocationRequestBuilder[TopClansRequest]):
    request_class = TopClansRequest


class TopPlayersRequestBuilder(LocationRequestBuilder[TopPlayersRequest]):
    request_class = TopPlayersRequest


class ClanSearchRequestBuilder(RequestBuilder[ClanSearchRequest]):
    request_class = ClanSearchRequest

    def __init__(self) -> None:
        super().__init__()
        self._name: Optional[str] = None
        self._score: Optional[int] = None
        self._min_members: Optional[int] = None
        self._max_members: Optional[int] = None

    def name(self, name: Optional[str]) -> "ClanSearchRequestBuilder":
        self._name = name
        return self

    def score(self, score: Optional[int]) -> "ClanSearchRequestBuilder":
        self._score = score
        return self

    def min_members(self, min_members: Optional[int]) -> "ClanSearchRequestBuilder":
        self._min_members = min_members
        return self

    def max_members(self, max_members: Optional[int]) -> "ClanSearchRequestBuilder":
        self._max_members = max_members
        return self

    def _fields(self) -> Dict[str, Any]:
        fields = super()._fields()
        fields.update(
            name=self._name,
            score=self._score,
            min_members=self._min_members,
            max_members=self._max_members,
        )
        return fields

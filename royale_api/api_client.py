"""Client for the cr-api Clash Royale statistics service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Type, TypeVar, Union
from urllib.parse import urlencode

from pydantic import ValidationError

from .config import ApiConfig
from .crawler import Crawler
from .models import (
    Alliance,
    Arena,
    Badges,
    Battle,
    ChestCycleList,
    Clan,
    ClanHistory,
    ClanSearch,
    ConstantCard,
    Constants,
    CountryCode,
    Endpoints,
    PopularClan,
    PopularPlayer,
    PopularTournament,
    Profile,
    Rarity,
    TopClan,
    TopPlayer,
    Tournament,
    parse_many,
    parse_one,
)
from .request import (
    ClanBattlesRequest,
    ClanHistoryRequest,
    ClanRequest,
    ClanSearchRequest,
    ClansRequest,
    LocationRequest,
    ProfileRequest,
    ProfilesRequest,
    Request,
    TagRequest,
    TagsRequest,
    TopClansRequest,
    TopPlayersRequest,
    TournamentsRequest,
)
from .validation import (
    InvalidArgumentError,
    check_not_empty,
    check_not_none,
    check_not_string,
    check_string,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
TR = TypeVar("TR", bound=TagRequest)
TSR = TypeVar("TSR", bound=TagsRequest)
LR = TypeVar("LR", bound=LocationRequest)


class RoyaleApiError(RuntimeError):
    """Raised when a cr-api call fails; the original error is the ``__cause__``."""


def _reject_foreign_request(value: Any, request_type: Type[Request]) -> None:
    if isinstance(value, Request):
        raise InvalidArgumentError(
            f"expected {request_type.__name__}, got {type(value).__name__}"
        )


def _tag_request(value: Union[str, TR, None], request_type: Type[TR]) -> TR:
    if isinstance(value, request_type):
        return value
    _reject_foreign_request(value, request_type)
    check_string(value, "tag")
    return request_type.builder().tag(value).build()


def _tags_request(value: Union[Sequence[str], TSR, None], request_type: Type[TSR]) -> TSR:
    if isinstance(value, request_type):
        return value
    _reject_foreign_request(value, request_type)
    check_not_string(value, "tags")
    check_not_empty(value, "tags")
    return request_type.builder().tags(value).build()


def _location_request(value: Union[str, LR, None], request_type: Type[LR]) -> LR:
    if isinstance(value, request_type):
        return value
    _reject_foreign_request(value, request_type)
    return request_type.builder().location_key(value).build()


def _search_request(value: Union[ClanSearch, ClanSearchRequest, None]) -> ClanSearchRequest:
    if isinstance(value, ClanSearchRequest):
        return value
    _reject_foreign_request(value, ClanSearchRequest)
    builder = ClanSearchRequest.builder()
    if value is not None:
        builder.name(value.name).score(value.score).min_members(value.min_members).max_members(
            value.max_members
        )
    return builder.build()


@dataclass
class RoyaleApiClient:
    """Maps cr-api operations onto URLs and parses their responses.

    The client keeps no per-call state, so one instance can be shared
    between threads.
    """

    config: ApiConfig
    crawler: Optional[Crawler] = None

    def __post_init__(self) -> None:
        check_not_none(self.config, "config")
        check_string(self.config.base_url, "url")
        check_string(self.config.developer_key, "developer_key")
        if self.crawler is None:
            self.crawler = Crawler(timeout=self.config.timeout)

    @classmethod
    def create(
        cls, url: str, developer_key: str, crawler: Optional[Crawler] = None
    ) -> "RoyaleApiClient":
        """Create a client for ``url`` authenticating with ``developer_key``."""

        check_string(url, "url")
        check_string(developer_key, "developer_key")
        return cls(ApiConfig(developer_key=developer_key, base_url=url), crawler=crawler)

    def _build_headers(self) -> Dict[str, str]:
        return {self.config.auth_header: self.config.developer_key}

    def _build_url(self, path: str, params: Optional[Mapping[str, str]] = None) -> str:
        url = f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"
        if params:
            url = f"{url}?{urlencode(params, safe=',')}"
        return url

    def _get(
        self,
        path: str,
        parse: Callable[[str], T],
        params: Optional[Mapping[str, str]] = None,
    ) -> T:
        """Fetch ``path`` and turn the body into a result with ``parse``.

        Raises:
            RoyaleApiError: If the transport fails or the body cannot be parsed.
        """

        url = self._build_url(path, params)
        logger.debug("cr-api request: %s", url)
        try:
            body = self.crawler.get(url, self._build_headers())
        except OSError as exc:
            logger.warning("cr-api request to %s failed: %s", url, exc)
            raise RoyaleApiError(f"cr-api request failed: {exc}") from exc
        try:
            return parse(body)
        except ValidationError as exc:
            logger.warning("cr-api returned an unreadable body for %s: %s", url, exc)
            raise RoyaleApiError(f"cr-api returned an unexpected response: {exc}") from exc

    def get_version(self) -> str:
        return self._get("version", str)

    # Players

    def get_profile(self, profile: Union[str, ProfileRequest]) -> Profile:
        """Fetch a player profile by tag or from a :class:`ProfileRequest`."""

        request = _tag_request(profile, ProfileRequest)
        return self._get(
            f"player/{request.tag}", partial(parse_one, Profile), request.query_parameters()
        )

    def get_profiles(self, profiles: Union[Sequence[str], ProfilesRequest]) -> List[Profile]:
        """Fetch several player profiles in one call."""

        request = _tags_request(profiles, ProfilesRequest)
        return self._get(
            f"player/{','.join(request.tags)}",
            partial(parse_many, Profile),
            request.query_parameters(),
        )

    def get_top_players(
        self, location: Union[str, TopPlayersRequest, None] = None
    ) -> List[TopPlayer]:
        """Fetch the player leaderboard, globally or for one location key."""

        request = _location_request(location, TopPlayersRequest)
        return self._get(
            self._location_path("top/players", request),
            partial(parse_many, TopPlayer),
            request.query_parameters(),
        )

    def get_popular_players(self) -> List[PopularPlayer]:
        return self._get("popular/players", partial(parse_many, PopularPlayer))

    # Clans

    def get_clan(self, clan: Union[str, ClanRequest]) -> Clan:
        request = _tag_request(clan, ClanRequest)
        return self._get(
            f"clan/{request.tag}", partial(parse_one, Clan), request.query_parameters()
        )

    def get_clans(self, clans: Union[Sequence[str], ClansRequest]) -> List[Clan]:
        request = _tags_request(clans, ClansRequest)
        return self._get(
            f"clan/{','.join(request.tags)}",
            partial(parse_many, Clan),
            request.query_parameters(),
        )

    def get_clan_search(
        self, search: Union[ClanSearch, ClanSearchRequest, None] = None
    ) -> List[Clan]:
        """Search clans by name, score and member count.

        Without criteria the unfiltered search endpoint is queried.
        """

        request = _search_request(search)
        return self._get("clan/search", partial(parse_many, Clan), request.query_parameters())

    def get_top_clans(
        self, location: Union[str, TopClansRequest, None] = None
    ) -> List[TopClan]:
        """Fetch the clan leaderboard, globally or for one location key."""

        request = _location_request(location, TopClansRequest)
        return self._get(
            self._location_path("top/clans", request),
            partial(parse_many, TopClan),
            request.query_parameters(),
        )

    def get_popular_clans(self) -> List[PopularClan]:
        return self._get("popular/clans", partial(parse_many, PopularClan))

    def get_clan_battles(self, clan: Union[str, ClanBattlesRequest]) -> List[Battle]:
        request = _tag_request(clan, ClanBattlesRequest)
        return self._get(
            f"clan/{request.tag}/battles",
            partial(parse_many, Battle),
            request.query_parameters(),
        )

    def get_clan_history(self, clan: Union[str, ClanHistoryRequest]) -> ClanHistory:
        request = _tag_request(clan, ClanHistoryRequest)
        return self._get(
            f"clan/{request.tag}/history",
            partial(parse_one, ClanHistory),
            request.query_parameters(),
        )

    # Tournaments

    def get_tournaments(self, tournament: Union[str, TournamentsRequest]) -> Tournament:
        request = _tag_request(tournament, TournamentsRequest)
        return self._get(
            f"tournaments/{request.tag}",
            partial(parse_one, Tournament),
            request.query_parameters(),
        )

    def get_popular_tournaments(self) -> List[PopularTournament]:
        return self._get("popular/tournaments", partial(parse_many, PopularTournament))

    # Constants

    def get_constants(self) -> Constants:
        return self._get("constants", partial(parse_one, Constants))

    def get_alliance_constants(self) -> Alliance:
        return self._get("constants/alliance/", partial(parse_one, Alliance))

    def get_arenas_constants(self) -> List[Arena]:
        return self._get("constants/arenas/", partial(parse_many, Arena))

    def get_badges_constants(self) -> Badges:
        return self._get("constants/badges/", partial(parse_one, Badges))

    def get_chest_cycle_constants(self) -> ChestCycleList:
        return self._get("constants/chestCycle/", partial(parse_one, ChestCycleList))

    def get_country_codes_constants(self) -> List[CountryCode]:
        return self._get("constants/countryCodes/", partial(parse_many, CountryCode))

    def get_rarities_constants(self) -> List[Rarity]:
        return self._get("constants/rarities/", partial(parse_many, Rarity))

    def get_cards_constants(self) -> List[ConstantCard]:
        return self._get("constants/cards/", partial(parse_many, ConstantCard))

    def get_endpoints(self) -> Endpoints:
        return self._get("endpoints", partial(parse_one, Endpoints))

    @staticmethod
    def _location_path(path: str, request: LocationRequest) -> str:
        if request.location_key:
            return f"{path}/{request.location_key}"
        return path

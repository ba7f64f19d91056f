"""Client library for the cr-api Clash Royale statistics service."""

from .api_client import RoyaleApiClient, RoyaleApiError
from .config import ApiConfig
from .crawler import Crawler, CrawlerError
from .models import ClanSearch
from .request import (
    ClanBattlesRequest,
    ClanHistoryRequest,
    ClanRequest,
    ClanSearchRequest,
    ClansRequest,
    ProfileRequest,
    ProfilesRequest,
    Request,
    TopClansRequest,
    TopPlayersRequest,
    TournamentsRequest,
)
from .validation import InvalidArgumentError, MissingArgumentError

__all__ = [
    "ApiConfig",
    "ClanBattlesRequest",
    "ClanHistoryRequest",
    "ClanRequest",
    "ClanSearch",
    "ClanSearchRequest",
    "ClansRequest",
    "Crawler",
    "CrawlerError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "ProfileRequest",
    "ProfilesRequest",
    "Request",
    "RoyaleApiClient",
    "RoyaleApiError",
    "TopClansRequest",
    "TopPlayersRequest",
    "TournamentsRequest",
]

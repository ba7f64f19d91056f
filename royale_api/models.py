"""Typed containers for cr-api responses.

The service answers in camelCase JSON; fields here are snake_case and mapped
through an alias generator. Irregular keys carry an explicit alias.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, RootModel, TypeAdapter
from pydantic.alias_generators import to_camel

M = TypeVar("M", bound=BaseModel)


class Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


def parse_one(model: Type[M], body: str) -> M:
    return model.model_validate_json(body)


def parse_many(model: Type[M], body: str) -> List[M]:
    return TypeAdapter(List[model]).validate_json(body)


# Shared pieces


class Badge(Model):
    name: Optional[str] = None
    category: Optional[str] = None
    id: Optional[int] = None
    image: Optional[str] = None


class Location(Model):
    name: Optional[str] = None
    is_country: Optional[bool] = None
    code: Optional[str] = None


class Tracking(Model):
    active: Optional[bool] = None
    legible: Optional[bool] = None
    snapshot_count: Optional[int] = None
    available: Optional[bool] = None


class Arena(Model):
    name: Optional[str] = None
    arena: Optional[str] = None
    arena_id: Optional[int] = Field(None, alias="arenaID")
    trophy_limit: Optional[int] = None


class Card(Model):
    name: Optional[str] = None
    key: Optional[str] = None
    id: Optional[int] = None
    rarity: Optional[str] = None
    type: Optional[str] = None
    elixir: Optional[int] = None
    level: Optional[int] = None
    max_level: Optional[int] = None
    count: Optional[int] = None
    required_for_upgrade: Optional[int] = None
    icon: Optional[str] = None


class ProfileClan(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    donations: Optional[int] = None
    donations_received: Optional[int] = None
    donations_delta: Optional[int] = None
    badge: Optional[Badge] = None


# Players


class PlayerStats(Model):
    level: Optional[int] = None
    max_trophies: Optional[int] = None
    three_crown_wins: Optional[int] = None
    cards_found: Optional[int] = None
    favorite_card: Optional[Card] = None
    total_donations: Optional[int] = None
    clan_cards_collected: Optional[int] = None
    tournament_cards_won: Optional[int] = None
    challenge_max_wins: Optional[int] = None
    challenge_cards_won: Optional[int] = None


class Games(Model):
    total: Optional[int] = None
    tournament_games: Optional[int] = None
    wins: Optional[int] = None
    war_day_wins: Optional[int] = None
    wins_percent: Optional[float] = None
    losses: Optional[int] = None
    losses_percent: Optional[float] = None
    draws: Optional[int] = None
    draws_percent: Optional[float] = None


class Profile(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    trophies: Optional[int] = None
    rank: Optional[int] = None
    arena: Optional[Arena] = None
    clan: Optional[ProfileClan] = None
    stats: Optional[PlayerStats] = None
    games: Optional[Games] = None
    deck_link: Optional[str] = None
    current_deck: List[Card] = []
    cards: List[Card] = []


class TopPlayer(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    rank: Optional[int] = None
    previous_rank: Optional[int] = None
    exp_level: Optional[int] = None
    trophies: Optional[int] = None
    donations_delta: Optional[int] = None
    clan: Optional[ProfileClan] = None
    arena: Optional[Arena] = None


class PopularPlayer(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    trophies: Optional[int] = None
    rank: Optional[int] = None
    arena: Optional[Arena] = None
    clan: Optional[ProfileClan] = None
    popularity: Optional[int] = None


# Clans


class Member(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    rank: Optional[int] = None
    previous_rank: Optional[int] = None
    role: Optional[str] = None
    exp_level: Optional[int] = None
    trophies: Optional[int] = None
    donations: Optional[int] = None
    donations_received: Optional[int] = None
    donations_delta: Optional[int] = None
    donations_percent: Optional[float] = None
    arena: Optional[Arena] = None


class Clan(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    score: Optional[int] = None
    member_count: Optional[int] = None
    required_score: Optional[int] = None
    donations: Optional[int] = None
    clan_chest_level: Optional[int] = None
    badge: Optional[Badge] = None
    location: Optional[Location] = None
    tracking: Optional[Tracking] = None
    members: List[Member] = []


class TopClan(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    score: Optional[int] = None
    member_count: Optional[int] = None
    rank: Optional[int] = None
    previous_rank: Optional[int] = None
    badge: Optional[Badge] = None
    location: Optional[Location] = None
    tracking: Optional[Tracking] = None


class PopularClan(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    score: Optional[int] = None
    member_count: Optional[int] = None
    badge: Optional[Badge] = None
    location: Optional[Location] = None
    popularity: Optional[int] = None


class ClanSnapshot(Model):
    member_count: Optional[int] = None
    donations: Optional[int] = None
    score: Optional[int] = None
    members: List[Member] = []


class ClanHistory(RootModel[Dict[str, ClanSnapshot]]):
    """Clan snapshots keyed by the date they were taken."""

    root: Dict[str, ClanSnapshot] = {}

    @property
    def snapshots(self) -> Dict[str, ClanSnapshot]:
        return self.root


@dataclass
class ClanSearch:
    """Clan search criteria; zero and empty values mean "any"."""

    name: Optional[str] = None
    score: Optional[int] = None
    min_members: Optional[int] = None
    max_members: Optional[int] = None


# Battles


class BattlePlayer(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    crowns_earned: Optional[int] = None
    start_trophies: Optional[int] = None
    trophy_change: Optional[int] = None
    clan: Optional[ProfileClan] = None
    deck_link: Optional[str] = None
    deck: List[Card] = []


class Battle(Model):
    type: Optional[str] = None
    challenge_type: Optional[str] = None
    utc_time: Optional[int] = None
    deck_type: Optional[str] = None
    team_size: Optional[int] = None
    winner: Optional[int] = None
    team_crowns: Optional[int] = None
    opponent_crowns: Optional[int] = None
    arena: Optional[Arena] = None
    team: List[BattlePlayer] = []
    opponent: List[BattlePlayer] = []


# Tournaments


class TournamentMember(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    score: Optional[int] = None
    rank: Optional[int] = None
    clan: Optional[ProfileClan] = None


class Tournament(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    capacity: Optional[int] = None
    max_capacity: Optional[int] = None
    player_count: Optional[int] = None
    preparation_duration: Optional[int] = None
    duration: Optional[int] = None
    create_time: Optional[int] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    members: List[TournamentMember] = []


class PopularTournament(Model):
    tag: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    capacity: Optional[int] = None
    max_capacity: Optional[int] = None
    popularity: Optional[int] = None


# Constants


class Alliance(Model):
    roles: List[Any] = []
    types: List[Any] = []


class Badges(RootModel[Dict[str, Badge]]):
    """Clan badges keyed by badge name."""

    root: Dict[str, Badge] = {}

    @property
    def badges(self) -> Dict[str, Badge]:
        return self.root


class ChestCycleList(Model):
    order: List[str] = []


class CountryCode(Model):
    id: Optional[int] = None
    name: Optional[str] = None
    key: Optional[str] = None
    is_country: Optional[bool] = None


class Rarity(Model):
    name: Optional[str] = None
    level_count: Optional[int] = None
    relative_level: Optional[int] = None
    max_level: Optional[int] = None
    donate_capacity: Optional[int] = None
    sort_capacity: Optional[int] = None
    upgrade_exp: List[int] = []
    upgrade_material_count: List[int] = []


class ConstantCard(Model):
    key: Optional[str] = None
    name: Optional[str] = None
    id: Optional[int] = None
    elixir: Optional[int] = None
    type: Optional[str] = None
    rarity: Optional[str] = None
    arena: Optional[int] = None
    description: Optional[str] = None


class Constants(Model):
    arenas: List[Arena] = []
    cards: List[ConstantCard] = []
    rarities: List[Rarity] = []
    country_codes: List[CountryCode] = []
    chest_cycle: Optional[ChestCycleList] = None
    alliance: Optional[Alliance] = None


class Endpoints(RootModel[List[str]]):
    """URLs of every endpoint the service exposes."""

    root: List[str] = []

    @property
    def urls(self) -> List[str]:
        return self.root

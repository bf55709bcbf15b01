"""
Ranking boards for the portal.

All three boards are rebuilt from scratch on every call from the collections
passed in; nothing is cached or stored. Ties are broken by id so repeated
calls on the same data always give the same order.
"""

import logging
import re
from typing import Iterable, Optional

from app.schemas.confederation import Confederation
from app.schemas.member import Member
from app.schemas.ranking import (
    ConfederationStanding,
    MemberStanding,
    RankingSnapshot,
    RankingsResponse,
    Top100EntryScore,
    Top100Standing,
)
from app.schemas.season import ArchivedSeason
from app.schemas.top100 import Top100Entry
from app.services.scoring import (
    calculate_member_points,
    calculate_top100_points,
    round_points,
)
from app.services.seasons import find_season

logger = logging.getLogger(__name__)

CURRENT_SEASON = "current"
UNKNOWN_CONFEDERATION = "Unknown"


def _index_confederations(
    confederations: Iterable[Confederation],
) -> dict[str, Confederation]:
    index = {}
    for conf in confederations:
        # First one wins if an id is duplicated
        index.setdefault(conf.id, conf)
    return index


def rank_confederations(
    confederations: Iterable[Confederation], members: Iterable[Member]
) -> list[ConfederationStanding]:
    """Sum member points per active confederation, highest first."""
    members_by_conf: dict[str, list[Member]] = {}
    for member in members:
        members_by_conf.setdefault(member.conf_id, []).append(member)

    standings = []
    for conf in confederations:
        if not conf.active:
            continue

        conf_members = members_by_conf.get(conf.id, [])
        total_points = sum(
            calculate_member_points(member, conf.tier) for member in conf_members
        )
        standings.append(
            ConfederationStanding(
                rank=0,  # Will be set after sorting
                id=conf.id,
                name=conf.name,
                tier=conf.tier,
                image_url=conf.image_url,
                total_points=round_points(total_points),
                member_count=len(conf_members),
            )
        )

    standings.sort(key=lambda s: (-s.total_points, s.id))
    for i, standing in enumerate(standings):
        standing.rank = i + 1

    return standings


def rank_members(
    confederations: Iterable[Confederation], members: Iterable[Member]
) -> list[MemberStanding]:
    """Score every member with its confederation's tier, highest first.

    Inactive confederations still count here. A member pointing at a
    confederation that no longer exists scores 0 under "Unknown".
    """
    conf_index = _index_confederations(confederations)

    standings = []
    for member in members:
        conf = conf_index.get(member.conf_id)
        if conf is None:
            logger.debug(
                f"Member {member.id} references missing confederation {member.conf_id}"
            )
            points, conf_name, conf_tier, conf_image = (
                0.0,
                UNKNOWN_CONFEDERATION,
                None,
                None,
            )
        else:
            points = calculate_member_points(member, conf.tier)
            conf_name, conf_tier, conf_image = conf.name, conf.tier, conf.image_url

        standings.append(
            MemberStanding(
                rank=0,
                id=member.id,
                name=member.name,
                team_name=member.team_name,
                conf_id=member.conf_id,
                is_manager=member.is_manager,
                points=points,
                conf_name=conf_name,
                conf_tier=conf_tier,
                conf_image=conf_image,
            )
        )

    standings.sort(key=lambda s: (-s.points, s.id))
    for i, standing in enumerate(standings):
        standing.rank = i + 1

    return standings


def _season_sort_key(entry: Top100EntryScore) -> tuple:
    # Numeric seasons ("15", "Temporada 15") compare as numbers
    match = re.search(r"\d+", entry.season)
    number = int(match.group()) if match else -1
    return (number, entry.season, entry.date_added)


def rank_top100(
    confederations: Iterable[Confederation], history: Iterable[Top100Entry]
) -> list[Top100Standing]:
    """Sum Top-100 placement points per confederation, highest first.

    Every current confederation gets a row, inactive ones included.
    History pointing at a confederation that no longer exists is ignored.
    """
    conf_index = _index_confederations(confederations)
    entries_by_conf: dict[str, list[Top100EntryScore]] = {
        conf_id: [] for conf_id in conf_index
    }

    for entry in history:
        if entry.conf_id not in entries_by_conf:
            continue

        placement = calculate_top100_points(entry.rank)
        entries_by_conf[entry.conf_id].append(
            Top100EntryScore(
                id=entry.id,
                season=entry.season,
                rank=entry.rank,
                date_added=entry.date_added,
                points=placement.points,
                bonus=placement.bonus,
                earned_points=placement.total,
            )
        )

    standings = []
    for conf_id, conf in conf_index.items():
        entries = sorted(entries_by_conf[conf_id], key=_season_sort_key, reverse=True)
        standings.append(
            Top100Standing(
                rank=0,
                conf_id=conf_id,
                conf_name=conf.name,
                conf_image=conf.image_url,
                active=conf.active,
                total_points=sum(e.earned_points for e in entries),
                entries=entries,
            )
        )

    standings.sort(key=lambda s: (-s.total_points, s.conf_id))
    for i, standing in enumerate(standings):
        standing.rank = i + 1

    return standings


def select_season(
    confederations: list[Confederation],
    members: list[Member],
    archived_seasons: Iterable[ArchivedSeason],
    season_id: Optional[str] = None,
) -> tuple[list[Confederation], list[Member], Optional[ArchivedSeason]]:
    """Pick the roster to rank: the live one, or an archived snapshot.

    Raises SeasonNotFoundError for an unknown season id.
    """
    if season_id is None or season_id == CURRENT_SEASON:
        return confederations, members, None

    season = find_season(archived_seasons, season_id)
    # Copies, so callers can never reach into the archived snapshot
    confederations = [conf.model_copy(deep=True) for conf in season.confederations]
    members = [member.model_copy(deep=True) for member in season.members]
    return confederations, members, season


def build_rankings(
    snapshot: RankingSnapshot, season_id: Optional[str] = None
) -> RankingsResponse:
    """Build all three boards for the live season or an archived one.

    The Top-100 board is not archived per season, so it always uses the live
    confederations.
    """
    confederations, members, season = select_season(
        snapshot.confederations,
        snapshot.members,
        snapshot.archived_seasons,
        season_id,
    )

    return RankingsResponse(
        season_id=season.id if season else None,
        season_name=season.name if season else None,
        confederations=rank_confederations(confederations, members),
        members=rank_members(confederations, members),
        top100=rank_top100(snapshot.confederations, snapshot.top100_history),
    )

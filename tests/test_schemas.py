import pytest
from app.schemas.confederation import Confederation, ConfTier
from app.schemas.member import GameCellUpdate, Member
from app.schemas.top100 import Top100Entry, Top100EntryCreate
from pydantic import ValidationError


def _cells(member):
    return [
        (game.result, game.attendance) for week in member.weeks for game in week.games
    ]


def test_missing_weeks_become_empty_grid():
    member = Member.model_validate({"id": "m1", "name": "Ana", "conf_id": "c1"})

    assert len(member.weeks) == 4
    assert all(len(week.games) == 4 for week in member.weeks)
    assert set(_cells(member)) == {("NONE", "NONE")}


def test_null_weeks_become_empty_grid():
    member = Member.model_validate({"id": "m1", "name": "Ana", "weeks": None})

    assert len(_cells(member)) == 16


def test_weeks_stored_as_index_map():
    member = Member.model_validate(
        {
            "id": "m1",
            "name": "Ana",
            "weeks": {
                "0": {"games": {"1": {"result": "WIN", "attendance": "PRESENT"}}},
                "2": {"games": [None, None, {"result": "DRAW"}]},
            },
        }
    )

    assert member.weeks[0].games[1].result == "WIN"
    assert member.weeks[0].games[1].attendance == "PRESENT"
    assert member.weeks[0].games[0].result == "NONE"
    assert member.weeks[2].games[2].result == "DRAW"
    assert member.weeks[2].games[2].attendance == "NONE"
    assert len(member.weeks[3].games) == 4


def test_short_and_long_lists_are_normalized():
    member = Member.model_validate(
        {
            "id": "m1",
            "name": "Ana",
            "weeks": [{"games": [{"result": "WIN"}]}] * 6,
        }
    )

    assert len(member.weeks) == 4
    assert [len(w.games) for w in member.weeks] == [4, 4, 4, 4]
    assert member.weeks[3].games[0].result == "WIN"
    assert member.weeks[3].games[1].result == "NONE"


def test_blank_and_unknown_cell_values_become_none():
    member = Member.model_validate(
        {
            "id": "m1",
            "name": "Ana",
            "weeks": [
                {
                    "games": [
                        {"result": "", "attendance": None},
                        {"result": "MAYBE", "attendance": "LATE"},
                    ]
                }
            ],
        }
    )

    assert member.weeks[0].games[0].result == "NONE"
    assert member.weeks[0].games[0].attendance == "NONE"
    assert member.weeks[0].games[1].result == "NONE"
    assert member.weeks[0].games[1].attendance == "NONE"


def test_cell_update_is_strict():
    with pytest.raises(ValidationError):
        GameCellUpdate(result="MAYBE")

    update = GameCellUpdate(attendance="NO_TRAIN")
    assert update.result is None
    assert update.attendance == "NO_TRAIN"


def test_confederation_accepts_stored_and_english_tier_names():
    stored = Confederation.model_validate({"id": "c1", "name": "A", "tier": "SUPREMA"})
    english = Confederation.model_validate({"id": "c2", "name": "B", "tier": "DIAMOND"})

    assert stored.tier is ConfTier.SUPREME
    assert english.tier is ConfTier.DIAMOND
    assert stored.active is True


def test_confederation_rejects_unknown_tier():
    with pytest.raises(ValidationError):
        Confederation.model_validate({"id": "c1", "name": "A", "tier": "BRONZE"})


def test_top100_rank_checked_on_create_only():
    with pytest.raises(ValidationError):
        Top100EntryCreate(conf_id="c1", season="15", rank=101)

    stored = Top100Entry.model_validate(
        {
            "id": "t1",
            "conf_id": "c1",
            "season": 15,
            "rank": 150,
            "date_added": "2025-01-01T00:00:00+00:00",
        }
    )
    assert stored.rank == 150
    assert stored.season == "15"

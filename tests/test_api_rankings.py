from datetime import datetime, timezone

import pytest
from app.schemas.confederation import ConfTier
from app.schemas.top100 import Top100Entry
from app.schemas.user import UserRole


@pytest.fixture
def league(repo, make_conf, make_member):
    repo.save_confederation(make_conf("c1", ConfTier.SUPREME))
    repo.save_confederation(make_conf("c2", ConfTier.DIAMOND))
    repo.save_confederation(make_conf("c3", active=False))
    repo.save_members(
        [
            make_member("m1", "c1", {(0, 0): ("WIN", "PRESENT")}),  # 7.5
            make_member("m2", "c2", {(0, 0): ("WIN", "NONE")}),  # 3.6
            make_member("m3", "c3", {(0, 0): ("WIN", "PRESENT")}),  # 6.0
            make_member("m4", "gone", {(0, 0): ("WIN", "PRESENT")}),
        ]
    )
    repo.add_top100_entry(
        Top100Entry(
            id="t1",
            conf_id="c2",
            season="15",
            rank=2,
            date_added=datetime(2025, 2, 1, tzinfo=timezone.utc),
        )
    )


def test_full_rankings(client, league):
    response = client.get("/api/v1/rankings")

    assert response.status_code == 200
    body = response.json()
    assert body["season_id"] is None
    assert [(c["id"], c["total_points"]) for c in body["confederations"]] == [
        ("c1", 7.5),
        ("c2", 3.6),
    ]
    assert [m["id"] for m in body["members"]] == ["m1", "m3", "m2", "m4"]
    assert body["members"][3]["conf_name"] == "Unknown"
    assert body["top100"][0]["conf_id"] == "c2"
    assert body["top100"][0]["total_points"] == 159


def test_confederation_board(client, league):
    board = client.get("/api/v1/rankings/confederations").json()

    assert [c["rank"] for c in board] == [1, 2]
    assert board[0]["tier"] == "SUPREMA"
    assert board[0]["member_count"] == 1


def test_top100_board_lists_every_confederation(client, league):
    board = client.get("/api/v1/rankings/top100").json()

    assert [s["conf_id"] for s in board] == ["c2", "c1", "c3"]
    assert board[0]["entries"][0]["bonus"] == 60
    assert board[2]["active"] is False


def test_current_season_alias(client, league):
    live = client.get("/api/v1/rankings/members").json()
    aliased = client.get(
        "/api/v1/rankings/members", params={"season_id": "current"}
    ).json()

    assert live == aliased


def test_unknown_season_is_404(client, league):
    response = client.get("/api/v1/rankings", params={"season_id": "missing"})

    assert response.status_code == 404


def test_archive_then_rank_past_season(client, repo, league, login_as):
    headers = login_as(UserRole.ADMIN)

    response = client.post(
        "/api/v1/seasons/archive", json={"name": "Temporada 14"}, headers=headers
    )
    assert response.status_code == 200
    summary = response.json()
    assert summary["member_count"] == 4
    assert summary["confederation_count"] == 3

    live = client.get("/api/v1/rankings/confederations").json()
    assert all(c["total_points"] == 0 for c in live)

    past = client.get(
        "/api/v1/rankings/confederations", params={"season_id": summary["id"]}
    ).json()
    assert [(c["id"], c["total_points"]) for c in past] == [("c1", 7.5), ("c2", 3.6)]

    # Renaming a live confederation does not rewrite history
    conf = repo.get_confederation("c1")
    repo.save_confederation(conf.model_copy(update={"name": "Renamed"}))
    past = client.get(
        "/api/v1/rankings", params={"season_id": summary["id"]}
    ).json()
    assert past["season_name"] == "Temporada 14"
    assert past["confederations"][0]["name"] == "Conf c1"


def test_scoring_config(client):
    config = client.get("/api/v1/scoring").json()

    multipliers = {t["tier"]: t["multiplier"] for t in config["tier_multipliers"]}
    assert multipliers == {"SUPREMA": 1.5, "DIAMANTE": 1.2, "PLATINA": 1.0, "OURO": 1.0}
    assert config["attendance_points"]["NO_TRAIN"] == -6
    assert config["top100"]["bonus_brackets"][0] == {
        "from_rank": 1,
        "to_rank": 1,
        "bonus": 100,
    }


def test_store_outage_returns_503(client, repo, league):
    repo.fail = True

    response = client.get("/api/v1/rankings")

    assert response.status_code == 503
    assert response.json() == {"detail": "Database temporarily unavailable"}

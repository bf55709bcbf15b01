import pytest
from app.core.passwords import verify_password
from app.db.repository import ALL_TABLES, CONFEDERATIONS, MEMBERS, SETTINGS
from app.schemas.confederation import ConfTier
from app.schemas.settings import GlobalSettings
from app.schemas.user import UserRole
from strongs_admin import cli
from strongs_admin.seed import DEFAULT_CONFEDERATIONS, clear_all_data, seed_defaults


@pytest.fixture
def admin_repo(repo, monkeypatch):
    monkeypatch.setattr(cli, "get_repository", lambda: repo)
    return repo


@pytest.fixture
def league(admin_repo, make_conf, make_member):
    admin_repo.save_confederation(make_conf("c1", ConfTier.SUPREME, name="Alpha"))
    admin_repo.save_member(
        make_member("m1", "c1", {(0, 0): ("WIN", "PRESENT")}, name="Ana")
    )
    return admin_repo


def test_set_week_stores_zero_based_index(admin_repo, capsys):
    assert cli.main(["set-week", "--week", "3"]) == 0

    assert admin_repo.get_settings().active_week == 2
    assert "Week 3 is now open" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["set-week"], ["set-week", "--week", "5"]])
def test_set_week_rejects_bad_week(admin_repo, argv):
    assert cli.main(argv) == 1
    assert SETTINGS not in admin_repo.tables


def test_rankings_prints_board(league, capsys):
    assert cli.main(["rankings"]) == 0

    out = capsys.readouterr().out
    assert "Current season" in out
    assert "Alpha" in out
    assert "7.50" in out


def test_rankings_members_board(league, capsys):
    assert cli.main(["rankings", "--board", "members"]) == 0

    assert "Ana" in capsys.readouterr().out


def test_rankings_unknown_season(league, capsys):
    assert cli.main(["rankings", "--season-id", "missing"]) == 1

    assert "Error: Season missing not found" in capsys.readouterr().out


def test_archive_season_then_list(league, capsys):
    assert cli.main(["archive-season", "--name", "Temporada 15"]) == 0
    assert league.get_member("m1").weeks[0].games[0].result == "NONE"

    (season,) = league.list_archived_seasons()
    assert season.members[0].weeks[0].games[0].result == "WIN"

    assert cli.main(["seasons"]) == 0
    out = capsys.readouterr().out
    assert "Temporada 15" in out
    assert season.id in out


def test_archive_season_requires_name(league):
    assert cli.main(["archive-season"]) == 1
    assert league.list_archived_seasons() == []


def test_seed_creates_owner_and_confederations(admin_repo):
    assert cli.main(
        ["seed", "--owner-username", "dono", "--owner-password", "s3nha-forte"]
    ) == 0

    owner = admin_repo.get_user_by_username("dono")
    assert owner.role == UserRole.OWNER
    assert verify_password("s3nha-forte", owner.password_hash)
    assert [c.id for c in admin_repo.list_confederations()] == ["c1", "c2"]


def test_seed_is_repeatable(repo):
    first = seed_defaults(repo, "dono", "s3nha-forte")
    repo.save_settings(GlobalSettings(active_week=2))
    second = seed_defaults(repo, "dono", "s3nha-forte")

    assert first == {
        "confederations": len(DEFAULT_CONFEDERATIONS),
        "owner": True,
        "settings": True,
    }
    assert second == {"confederations": 0, "owner": False, "settings": False}
    assert len(repo.list_users()) == 1
    # The open week survives a second seed
    assert repo.get_settings().active_week == 2


def test_clear_all_data(league):
    seed_defaults(league, "dono", "s3nha-forte")

    results = clear_all_data(league)

    assert set(results) == set(ALL_TABLES)
    assert results[MEMBERS] == 1
    assert results[CONFEDERATIONS] == 2  # c1 was already there
    assert results[SETTINGS] == 1
    assert league.list_confederations() == []


def test_clear_data_needs_confirmation(league, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    assert cli.main(["clear-data"]) == 1
    assert "Aborted." in capsys.readouterr().out
    assert len(league.list_members()) == 1


def test_clear_data_confirmed(league, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "y")

    assert cli.main(["clear-data"]) == 0
    assert league.list_members() == []


def test_store_errors_exit_with_failure(league):
    league.fail = True

    assert cli.main(["rankings"]) == 1

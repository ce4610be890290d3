import cli
from ingestion import ftcscout
from ingestion.ftcscout import RatingFetchError
from output.export import read_exported_ranks


def _fail_if_called(*args, **kwargs):
    raise AssertionError("should not fetch")


def test_bad_team_number_rejected_before_fetch(monkeypatch, capsys):
    monkeypatch.setattr(ftcscout, "fetch_team_ratings", _fail_if_called)
    assert cli.main(["simulate", "16236", "abc"]) == cli.EXIT_INPUT_ERROR
    assert "ERROR: 'abc' is not a valid team number." in capsys.readouterr().out


def test_blank_event_code_rejected(monkeypatch, capsys):
    monkeypatch.setattr(ftcscout, "fetch_event", _fail_if_called)
    assert cli.main(["pick-list", "--event", "  ", "--team", "16236"]) == cli.EXIT_INPUT_ERROR
    assert "event code" in capsys.readouterr().out


def test_fetch_failure_reported(monkeypatch, capsys):
    def fail(numbers, season, rng):
        raise RatingFetchError("Failed to fetch team 16236: Team 16236 not found")

    monkeypatch.setattr(ftcscout, "fetch_team_ratings", fail)
    assert cli.main(["predict", "16236", "1", "2", "3"]) == cli.EXIT_FETCH_ERROR
    assert "ERROR: Failed to fetch team 16236" in capsys.readouterr().out


def test_simulate_command(monkeypatch, make_team, capsys):
    teams = [make_team(1, 20, 50, 10), make_team(2, 30, 60, 20)]
    monkeypatch.setattr(ftcscout, "fetch_team_ratings", lambda numbers, season, rng: teams)
    assert cli.main(["--seed", "3", "simulate", "1", "2", "--sims", "500", "--target", "190"]) == 0
    out = capsys.readouterr().out
    assert "Mean score" in out
    assert "P(score >= 190)" in out


def test_pick_list_from_ratings_file(tmp_path, capsys):
    ratings = tmp_path / "ratings.csv"
    ratings.write_text(
        "team,name,rating,auto,teleop,endgame\n"
        "100,Home,50,10,30,10\n"
        "200,Alpha,120,45,60,15\n"
        "300,Beta,70,40,20,10\n"
        "400,Gamma,80,5,70,5\n"
    )
    export = tmp_path / "picks.csv"

    code = cli.main(["--seed", "1", "pick-list", "--team", "100", "--ratings-file", str(ratings),
                     "--quick", "--event-sims", "5", "--export", str(export)])

    assert code == 0
    out = capsys.readouterr().out
    assert "PICK LIST" in out
    assert read_exported_ranks(str(export)) == [1, 2, 3]


def test_pick_list_team_missing_from_ratings_file(tmp_path, capsys):
    ratings = tmp_path / "ratings.csv"
    ratings.write_text("team,rating\n1,40\n2,50\n")
    assert cli.main(["pick-list", "--team", "9", "--ratings-file", str(ratings)]) == cli.EXIT_INPUT_ERROR
    assert "Team 9 is not in" in capsys.readouterr().out


def test_sims_below_one_rejected_before_fetch(monkeypatch, capsys):
    monkeypatch.setattr(ftcscout, "fetch_team_ratings", _fail_if_called)
    assert cli.main(["simulate", "1", "2", "--sims", "0"]) == cli.EXIT_INPUT_ERROR
    assert "ERROR: --sims must be at least 1, got 0." in capsys.readouterr().out
    assert cli.main(["predict", "1", "2", "3", "4", "--sims", "-5"]) == cli.EXIT_INPUT_ERROR


def test_negative_event_sims_and_zero_top_rejected(monkeypatch, capsys):
    monkeypatch.setattr(ftcscout, "fetch_event", _fail_if_called)
    assert cli.main(["pick-list", "--event", "EV", "--team", "1", "--event-sims", "-1"]) == cli.EXIT_INPUT_ERROR
    assert "ERROR: --event-sims must be at least 0" in capsys.readouterr().out
    assert cli.main(["pick-list", "--event", "EV", "--team", "1", "--top", "0"]) == cli.EXIT_INPUT_ERROR
    assert "ERROR: --top must be at least 1" in capsys.readouterr().out


def test_pick_list_aborts_when_your_team_has_no_stats(monkeypatch, make_team, capsys):
    build_calls = []
    monkeypatch.setattr(ftcscout, "fetch_event", lambda code, season, rng: (
        "Event", "EV", [make_team(1, 0, 0, rating=0), make_team(2, 20, 50, 10)]))
    monkeypatch.setattr("optimizer.engine.build_pick_list", lambda *a, **k: build_calls.append(a))

    code = cli.main(["pick-list", "--event", "EV", "--team", "1", "--quick", "--event-sims", "0"])

    assert code == cli.EXIT_FETCH_ERROR
    assert "ERROR: No stats for team 1 in 2025 season" in capsys.readouterr().out
    assert build_calls == []


def test_pick_list_rejects_zero_rated_team_in_ratings_file(tmp_path, capsys):
    ratings = tmp_path / "ratings.csv"
    ratings.write_text("team,rating\n1,0\n2,50\n")
    assert cli.main(["pick-list", "--team", "1", "--ratings-file", str(ratings)]) == cli.EXIT_INPUT_ERROR
    assert "Team 1 has no rating in" in capsys.readouterr().out

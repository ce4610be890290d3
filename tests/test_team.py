import dataclasses

import pytest

from models.team import TeamRating, split_phases, synthetic_consistency


def test_split_phases_sums_to_rating():
    auto, teleop, endgame = split_phases(80.0)
    assert (auto, teleop, endgame) == pytest.approx((20.0, 44.0, 16.0))
    assert auto + teleop + endgame == pytest.approx(80.0)


def test_split_phases_keeps_reported_values():
    assert split_phases(100.0, 30.0, None, 12.0) == pytest.approx((30.0, 55.0, 12.0))


def test_zero_phase_counts_as_missing():
    assert split_phases(40.0, 0.0, 0.0, 0.0) == pytest.approx((10.0, 22.0, 8.0))


def test_synthetic_consistency_floor():
    assert synthetic_consistency(500.0, 0.0) == 5.0
    assert synthetic_consistency(0.0, 0.0) == pytest.approx(20.0)
    assert synthetic_consistency(100.0, 1.0) == pytest.approx(15.0)


def test_team_rating_is_immutable(make_team):
    team = make_team(1234, 20, 40)
    with pytest.raises(dataclasses.FrozenInstanceError):
        team.rating = 0


def test_phases_and_str():
    team = TeamRating(number=16236, name="Robo", auto=10, teleop=20, endgame=5, rating=35)
    assert team.phases == (10, 20, 5)
    assert str(team) == "16236 Robo"

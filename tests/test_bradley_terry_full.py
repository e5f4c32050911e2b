"""
expected values published with the OpenSkill rating libraries for the full Bradley-Terry model
"""
import pytest
from skillrate import Env, GameResult, Rating


def rate(teams, ranks, **kwargs):
    env = Env(model='bt_full', **kwargs)
    return env.rate(GameResult(teams=teams, ranks=ranks))


def assert_ratings(got, want):
    assert len(got) == len(want)
    for got_team, want_team in zip(got, want):
        assert len(got_team) == len(want_team)
        for got_rating, want_rating in zip(got_team, want_team):
            assert got_rating.mu == pytest.approx(want_rating.mu, rel=1e-6)
            assert got_rating.sigma == pytest.approx(want_rating.sigma, rel=1e-6)


def test_solo_game_does_not_change_rating():
    assert rate([[Rating()]], [1]) == [[Rating()]]


def test_2p_ffa():
    got = rate([[Rating()], [Rating()]], [1, 2])
    assert_ratings(
        got,
        [
            [Rating(27.63523138347365, 8.065506316323548)],
            [Rating(22.36476861652635, 8.065506316323548)],
        ],
    )


def test_3p_ffa():
    got = rate([[Rating()] for _ in range(3)], [1, 2, 3])
    assert_ratings(
        got,
        [
            [Rating(30.2704627669473, 7.788474807872566)],
            [Rating(25.0, 7.788474807872566)],
            [Rating(19.7295372330527, 7.788474807872566)],
        ],
    )


def test_4p_ffa():
    got = rate([[Rating()] for _ in range(4)], [1, 2, 3, 4])
    assert_ratings(
        got,
        [
            [Rating(32.90569415042095, 7.5012190693964005)],
            [Rating(27.63523138347365, 7.5012190693964005)],
            [Rating(22.36476861652635, 7.5012190693964005)],
            [Rating(17.09430584957905, 7.5012190693964005)],
        ],
    )


def test_5p_ffa():
    got = rate([[Rating()] for _ in range(5)], [1, 2, 3, 4, 5])
    assert_ratings(
        got,
        [
            [Rating(35.5409255338946, 7.202515895247076)],
            [Rating(30.2704627669473, 7.202515895247076)],
            [Rating(25.0, 7.202515895247076)],
            [Rating(19.729537233052703, 7.202515895247076)],
            [Rating(14.4590744661054, 7.202515895247076)],
        ],
    )


def test_3_teams_different_sized_players():
    got = rate([[Rating()] * 3, [Rating()], [Rating()] * 2], [1, 2, 3])
    assert_ratings(
        got,
        [
            [Rating(25.992743915179297, 8.19709997489984)] * 3,
            [Rating(28.48909130001799, 8.220848339985736)],
            [Rating(20.518164784802714, 8.127515465304823)] * 2,
        ],
    )


def test_custom_gamma_with_k_2():
    got = rate([[Rating()], [Rating()]], [1, 2], gamma=lambda c, k, team: 1.0 / k)
    assert_ratings(
        got,
        [
            [Rating(27.63523138347365, 8.122328620674137)],
            [Rating(22.36476861652635, 8.122328620674137)],
        ],
    )


def test_custom_gamma_with_k_5():
    got = rate([[Rating()] for _ in range(5)], [1, 2, 3, 4, 5], gamma=lambda c, k, team: 1.0 / k)
    assert_ratings(
        got,
        [
            [Rating(35.5409255338946, 7.993052538854532)],
            [Rating(30.2704627669473, 7.993052538854532)],
            [Rating(25.0, 7.993052538854532)],
            [Rating(19.729537233052703, 7.993052538854532)],
            [Rating(14.4590744661054, 7.993052538854532)],
        ],
    )


def test_draw_between_equals_keeps_mu():
    got = rate([[Rating()], [Rating()]], [1, 1])
    assert got[0][0].mu == pytest.approx(25.0)
    assert got[1][0].mu == pytest.approx(25.0)
    assert got[0][0].sigma < Rating().sigma

"""
expected values published with the OpenSkill rating libraries for the partial Bradley-Terry model
"""
import math
import pytest
from skillrate import Env, GameResult, Rating
from skillrate.utils.constants import DEFAULT_BETA, DEFAULT_MU, DEFAULT_SIGMA, KAPPA


def rate(teams, ranks, **kwargs):
    env = Env(model='bt_part', **kwargs)
    return env.rate(GameResult(teams=teams, ranks=ranks))


def assert_ratings(got, want):
    assert len(got) == len(want)
    for got_team, want_team in zip(got, want):
        assert len(got_team) == len(want_team)
        for got_rating, want_rating in zip(got_team, want_team):
            assert got_rating.mu == pytest.approx(want_rating.mu, rel=1e-6)
            assert got_rating.sigma == pytest.approx(want_rating.sigma, rel=1e-6)


WINNER = Rating(27.63523138347365, 8.065506316323548)
MIDDLE = Rating(25.0, 7.788474807872566)
LOSER = Rating(22.36476861652635, 8.065506316323548)


def test_solo_game_does_not_change_rating():
    assert rate([[Rating()]], [1]) == [[Rating()]]


def test_2p_ffa():
    assert_ratings(rate([[Rating()], [Rating()]], [1, 2]), [[WINNER], [LOSER]])


def test_3p_ffa():
    assert_ratings(rate([[Rating()] for _ in range(3)], [1, 2, 3]), [[WINNER], [MIDDLE], [LOSER]])


def test_4p_ffa():
    got = rate([[Rating()] for _ in range(4)], [1, 2, 3, 4])
    assert_ratings(got, [[WINNER], [MIDDLE], [MIDDLE], [LOSER]])


def test_5p_ffa():
    got = rate([[Rating()] for _ in range(5)], [1, 2, 3, 4, 5])
    assert_ratings(got, [[WINNER], [MIDDLE], [MIDDLE], [MIDDLE], [LOSER]])


def test_3_teams_different_sized_players():
    got = rate([[Rating()] * 3, [Rating()], [Rating()] * 2], [1, 2, 3])
    assert_ratings(
        got,
        [
            [Rating(25.219231461891965, 8.293401112661954)] * 3,
            [Rating(28.48909130001799, 8.220848339985736)],
            [Rating(21.291677238090045, 8.206896387427937)] * 2,
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
    edge = 8.249579113843055
    middle = 8.16496580927726
    assert_ratings(
        got,
        [
            [Rating(27.63523138347365, edge)],
            [Rating(25.0, middle)],
            [Rating(25.0, middle)],
            [Rating(25.0, middle)],
            [Rating(22.36476861652635, edge)],
        ],
    )


def updated(omega, delta):
    return Rating(DEFAULT_MU + omega, DEFAULT_SIGMA * math.sqrt(max(1.0 - delta, KAPPA)))


def test_tie_only_sees_ladder_neighbours():
    """
    the first team ties with its only neighbour, the second ties with the first and beats the third,
    and the third only sees the second. equal ratings give every pair prob 0.5
    """
    got = rate([[Rating()], [Rating()], [Rating()]], [1, 1, 2])
    sigma_sq = DEFAULT_SIGMA**2.0
    combined_dev = math.sqrt(2.0 * sigma_sq + 2.0 * DEFAULT_BETA**2.0)
    gamma = DEFAULT_SIGMA / combined_dev
    win_omega = (sigma_sq / combined_dev) * (1.0 - 0.5)
    pair_delta = ((gamma * sigma_sq / combined_dev) / combined_dev) * 0.5 * 0.5
    want = [
        [updated(0.0, pair_delta)],
        [updated(win_omega, 2.0 * pair_delta)],
        [updated(-win_omega, pair_delta)],
    ]
    assert_ratings(got, want)
    assert got[0][0].mu == pytest.approx(DEFAULT_MU)
    assert got[0][0].sigma < DEFAULT_SIGMA


def test_mirrored_ladder_gives_tied_teams_equal_ratings():
    got = rate([[Rating()] for _ in range(4)], [2, 1, 1, 2])
    assert got[1][0].mu == pytest.approx(got[2][0].mu)
    assert got[1][0].sigma == pytest.approx(got[2][0].sigma)
    assert got[0][0].mu == pytest.approx(got[3][0].mu)
    assert got[0][0].sigma == pytest.approx(got[3][0].sigma)
    assert got[0][0].mu < DEFAULT_MU < got[1][0].mu

"""Draw and win probabilities for a match that has not been played yet"""
from typing import List, Sequence
import numpy as np
from scipy.stats import norm
from skillrate.core.rating import Rating, TeamRating, to_team_ratings, total_players
from skillrate.core.validate import validate_teams
from skillrate.utils.math_utils import denominator, draw_margin, sigma_bar


def _team_arrays(team_ratings: Sequence[TeamRating]):
    mus = np.array([team.mu for team in team_ratings], dtype=np.float64)
    sigma_sqs = np.array([team.sigma_sq for team in team_ratings], dtype=np.float64)
    sizes = np.array([team.size for team in team_ratings], dtype=np.float64)
    return mus, sigma_sqs, sizes


def _pairwise_devs(sigma_sqs: np.ndarray, sizes: np.ndarray, beta_squared: float) -> np.ndarray:
    """combined deviation for each ordered pair of teams, scaled by the players in just those two teams"""
    return sigma_bar(sigma_sqs[:, None], sigma_sqs[None, :], beta_squared, sizes[:, None] + sizes[None, :])


def predict_draw(teams: Sequence[Sequence[Rating]], beta: float) -> float:
    """
    Probability that the match ends in a draw.

    Every ordered pair of teams contributes the probability mass of its performance difference
    falling inside the draw margin, which is scaled to the total number of players in the match.

    Parameters:
        teams: the teams in the match, each a sequence of member ratings
        beta (float): performance deviation

    Returns:
        float: 1.0 for a single team, otherwise the normalized sum over all ordered pairs
    """
    validate_teams(teams)
    num_teams = len(teams)
    if num_teams == 1:
        return 1.0

    team_ratings = to_team_ratings(teams)
    mus, sigma_sqs, sizes = _team_arrays(team_ratings)
    margin = draw_margin(num_teams, total_players(team_ratings), beta)
    devs = _pairwise_devs(sigma_sqs, sizes, beta**2.0)
    mu_diffs = mus[:, None] - mus[None, :]
    probs = norm.cdf((margin - mu_diffs) / devs) - norm.cdf((mu_diffs - margin) / devs)
    off_diagonal = ~np.eye(num_teams, dtype=np.bool_)
    denom = denominator(num_teams, 1 if num_teams > 2 else 2)
    return float(np.abs(probs[off_diagonal].sum()) / denom)


def predict_win(teams: Sequence[Sequence[Rating]], beta: float) -> List[float]:
    """
    Probability of each team winning the match.

    Parameters:
        teams: the teams in the match, each a sequence of member ratings
        beta (float): performance deviation

    Returns:
        list of float: one probability per team, in the order the teams were given
    """
    validate_teams(teams)
    num_teams = len(teams)
    if num_teams == 1:
        return [1.0]

    team_ratings = to_team_ratings(teams)
    mus, sigma_sqs, sizes = _team_arrays(team_ratings)
    devs = _pairwise_devs(sigma_sqs, sizes, beta**2.0)
    probs = norm.cdf((mus[:, None] - mus[None, :]) / devs)
    np.fill_diagonal(probs, 0.0)
    return (probs.sum(axis=1) / denominator(num_teams, 2)).tolist()

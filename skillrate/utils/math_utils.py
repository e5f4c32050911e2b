"""math utility functions for the rating models and predictions"""
import math
import statistics
import numpy as np
from scipy.stats import norm
from skillrate.utils.constants import EPSILON, VT_THRESHOLD


def sigmoid_scalar(x):
    """no need to use numpy on scalars, branches so exp never overflows"""
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    exp_x = math.exp(x)
    return exp_x / (1.0 + exp_x)


INV_SQRT_2 = 1.0 / math.sqrt(2.0)


def norm_cdf(x):
    """cdf of standard normal, erfc keeps precision deep in the lower tail"""
    return 0.5 * math.erfc(-x * INV_SQRT_2)


STANDARD_NORMAL = statistics.NormalDist()


def norm_pdf(x):
    """pdf of standard normal"""
    return STANDARD_NORMAL.pdf(x)


def norm_ppf(p):
    """inverse cdf of standard normal"""
    return float(norm.ppf(p))


def draw_margin(num_teams: int, total_players: int, beta: float) -> float:
    """performance gap under which a match is considered a draw, grows with the number of players"""
    return math.sqrt(total_players) * beta * norm_ppf((1.0 + 1.0 / num_teams) / 2.0)


def denominator(num_teams: int, n: int) -> float:
    return (num_teams * (num_teams - 1)) / n


def sigma_bar(sigma_sq_a, sigma_sq_b, beta_squared: float, total_players):
    """combined standard deviation of the performance difference between two teams, broadcasts over numpy arrays"""
    return np.sqrt((total_players * beta_squared) + sigma_sq_a + sigma_sq_b)


def score(rank_a, rank_b):
    """
    outcome of a comparison seen from the side of rank_b, lower ranks finish ahead

    Returns 1.0 when rank_b beat rank_a, 0.0 when it lost and 0.5 for a tie.
    """
    if rank_a < rank_b:
        return 0.0
    if rank_a > rank_b:
        return 1.0
    return 0.5


def v(x, t):
    """additive mean correction for a win with margin t"""
    xt = x - t
    denom = norm_cdf(xt)
    if denom < EPSILON:
        return -xt
    return norm_pdf(xt) / denom


def w(x, t):
    """multiplicative variance correction for a win with margin t"""
    xt = x - t
    denom = norm_cdf(xt)
    if denom < EPSILON:
        return 1.0 if x < 0.0 else 0.0
    v_xt = v(x, t)
    return v_xt * (v_xt + xt)


def vt(x, t):
    """additive mean correction for a draw inside the window [-t, t]"""
    abs_x = math.fabs(x)
    b = norm_cdf(t - abs_x) - norm_cdf(-t - abs_x)
    if b < VT_THRESHOLD:
        if x < 0.0:
            return -x - t
        return -x + t
    a = norm_pdf(t - abs_x) - norm_pdf(-t - abs_x)
    if x < 0.0:
        return -a / b
    return a / b


def wt(x, t):
    """multiplicative variance correction for a draw inside the window [-t, t]"""
    abs_x = math.fabs(x)
    b = norm_cdf(t - abs_x) - norm_cdf(-t - abs_x)
    if b < EPSILON:
        return 1.0
    w_num = ((t - abs_x) * norm_pdf(t - abs_x)) + ((t + abs_x) * norm_pdf(-t - abs_x))
    return (w_num / b) + (vt(x, t) ** 2.0)

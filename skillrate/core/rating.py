"""Ratings, team aggregates and the policy functions shared by every model"""
import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple
from skillrate.utils.constants import DEFAULT_MU, DEFAULT_SIGMA


@dataclass(frozen=True)
class Rating:
    """
    Gaussian belief about the skill of one player

    Attributes:
        mu (float): mean of the skill estimate
        sigma (float): standard deviation of the skill estimate, never stored as a variance
    """

    mu: float = DEFAULT_MU
    sigma: float = DEFAULT_SIGMA

    def __str__(self):
        return f'(mu: {self.mu}, sigma: {self.sigma})'


@dataclass(frozen=True)
class TeamRating:
    """summed mean and variance of the members of one team along with its finishing rank"""

    members: Tuple[Rating, ...]
    rank: int
    mu: float = field(init=False)
    sigma_sq: float = field(init=False)

    def __post_init__(self):
        members = tuple(self.members)
        object.__setattr__(self, 'members', members)
        object.__setattr__(self, 'mu', sum(member.mu for member in members))
        object.__setattr__(self, 'sigma_sq', sum(member.sigma**2.0 for member in members))

    @property
    def size(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class GameResult:
    """
    The observed outcome of one match

    Attributes:
        teams: the teams in the match, each an ordered sequence of member ratings
        ranks: finishing rank of each team, lower is better and ties share a value.
            Defaults to the position of the team in `teams`.
    """

    teams: Sequence[Sequence[Rating]]
    ranks: Optional[Sequence[int]] = None


GammaFunc = Callable[[float, float, TeamRating], float]
OrdinalFunc = Callable[[Rating, float], float]


def default_gamma(c: float, num_teams: float, team: TeamRating) -> float:
    """shrink the variance in proportion to the share of the combined deviation owned by the team"""
    return math.sqrt(team.sigma_sq) / c


def default_ordinal(rating: Rating, z: float) -> float:
    """conservative skill estimate, mu - z * sigma"""
    return rating.mu - (z * rating.sigma)


def to_team_ratings(teams: Sequence[Sequence[Rating]], ranks: Optional[Sequence[int]] = None) -> List[TeamRating]:
    if ranks is None:
        ranks = range(len(teams))
    return [TeamRating(members=tuple(team), rank=rank) for team, rank in zip(teams, ranks)]


def total_players(team_ratings: Sequence[TeamRating]) -> int:
    return sum(team.size for team in team_ratings)


def ladder_pairs(items: Sequence) -> List[list]:
    """
    Pairs every item with its immediate neighbours in the supplied order.

    The result holds, for each position, a list of the previous item (when there is one)
    followed by the next item (when there is one). Partial models only compare adjacent teams.

    Example:
        ladder_pairs([a, b, c]) == [[b], [a, c], [b]]
    """
    pairs = []
    for idx in range(len(items)):
        neighbours = []
        if idx > 0:
            neighbours.append(items[idx - 1])
        if idx < len(items) - 1:
            neighbours.append(items[idx + 1])
        pairs.append(neighbours)
    return pairs

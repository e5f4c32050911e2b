"""base class for the Bayesian online rating models"""
import math
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Sequence, Tuple
from skillrate.core.rating import GammaFunc, Rating, TeamRating, default_gamma
from skillrate.utils.constants import DEFAULT_BETA, KAPPA


class RatingModel(ABC):
    """
    Base class for the update rules. Every rule turns a list of teams and their finishing ranks
    into new ratings for each team member by accumulating a mean shift (omega) and a variance
    shrink (delta) per team, then spreading both over the members in proportion to their variance.

    Models keep no state between calls, the parameters set here are never modified after construction.

    Attributes:
        beta (float): standard deviation of a single performance around the true skill.
        kappa (float): lower bound on the variance multiplier, keeps sigma strictly positive.
        gamma (GammaFunc): policy scaling how strongly the variance shrinks, called as gamma(c, num_teams, team).
    """

    def __init__(self, beta: float = DEFAULT_BETA, kappa: float = KAPPA, gamma: GammaFunc = default_gamma):
        """
        Parameters:
            beta (float, optional): performance deviation. Defaults to 25/6.
            kappa (float, optional): variance multiplier floor. Defaults to 0.0001.
            gamma (GammaFunc, optional): variance shrink policy. Defaults to sqrt(team sigma^2) / c.
        """
        self.beta = beta
        self.beta_squared = beta**2.0
        self.two_beta_squared = 2.0 * (beta**2.0)
        self.kappa = kappa
        self.gamma = gamma

    @abstractmethod
    def rate(self, teams: Sequence[Sequence[Rating]], ranks: Optional[Sequence[int]] = None) -> List[List[Rating]]:
        """
        Computes new ratings for every member of every team.

        Parameters:
            teams: teams in the match, each an ordered sequence of member ratings. Callers are expected
                to have validated that there are at least 2 teams and that no team is empty.
            ranks (optional): finishing rank of each team, lower is better and ties share a value.
                Defaults to the position of each team.

        Returns:
            list of lists of Rating with exactly the shape of `teams`
        """
        raise NotImplementedError

    def update_team_rating(self, team: TeamRating, omega: float, delta: float) -> List[Rating]:
        """distribute the team level mean shift and variance shrink over the members of the team"""
        new_ratings = []
        for member in team.members:
            sigma_sq = member.sigma**2.0
            share = sigma_sq / team.sigma_sq
            new_mu = member.mu + (share * omega)
            new_sigma = member.sigma * math.sqrt(max(1.0 - (share * delta), self.kappa))
            new_ratings.append(Rating(mu=new_mu, sigma=new_sigma))
        return new_ratings


def zip_without_self(items: Sequence) -> Iterator[Tuple[object, list]]:
    """yields each item together with a list of every other item"""
    for idx, item in enumerate(items):
        yield item, [other for other_idx, other in enumerate(items) if other_idx != idx]

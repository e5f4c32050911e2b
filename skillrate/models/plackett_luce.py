"""Weng/Lin Bayesian Online Rating system, Plackett-Luce Edition"""
import math
from typing import List, Optional, Sequence
from scipy.special import logsumexp
from skillrate.core.base import RatingModel
from skillrate.core.rating import Rating, TeamRating, to_team_ratings


class PlackettLuce(RatingModel):
    """
    Rates all teams at once under the Plackett-Luce model of a full ranking. Each team is
    compared with the softmax of exp(mu / c) over the teams that finished at or behind it,
    using a single combined deviation c for the whole match rather than one per pair.
    """

    def rate(self, teams: Sequence[Sequence[Rating]], ranks: Optional[Sequence[int]] = None) -> List[List[Rating]]:
        team_ratings = to_team_ratings(teams, ranks)
        c = self.combined_dev(team_ratings)
        log_sum_q = self.log_sum_q(team_ratings, c)
        a = self.tie_counts(team_ratings)
        num_teams = float(len(team_ratings))

        new_teams = []
        for i, team_i in enumerate(team_ratings):
            omega = 0.0
            delta = 0.0
            mu_over_c = team_i.mu / c
            for q, team_q in enumerate(team_ratings):
                if team_q.rank > team_i.rank:
                    continue
                # team_i is inside the sum for q, so this stays within [0, 1]
                prob = math.exp(mu_over_c - log_sum_q[q])
                delta += (prob * (1.0 - prob)) / a[q]
                if q == i:
                    omega += (1.0 - prob) / a[q]
                else:
                    omega -= prob / a[q]
            omega *= team_i.sigma_sq / c
            delta *= team_i.sigma_sq / (c**2.0)
            delta *= self.gamma(c, num_teams, team_i)
            new_teams.append(self.update_team_rating(team_i, omega, delta))
        return new_teams

    def combined_dev(self, team_ratings: Sequence[TeamRating]) -> float:
        """c = sqrt(sum over teams of (sigma^2 + beta^2))"""
        return math.sqrt(sum(team.sigma_sq + self.beta_squared for team in team_ratings))

    @staticmethod
    def log_sum_q(team_ratings: Sequence[TeamRating], c: float) -> List[float]:
        """
        for each team q, the log of the sum of exp(mu / c) over the teams ranked the same as or worse than q.
        kept in log space so large mu / c neither overflows nor underflows to a zero sum
        """
        exponents = [team.mu / c for team in team_ratings]
        return [
            float(logsumexp([x for x, team_i in zip(exponents, team_ratings) if team_i.rank >= team_q.rank]))
            for team_q in team_ratings
        ]

    @staticmethod
    def tie_counts(team_ratings: Sequence[TeamRating]) -> List[float]:
        """number of teams sharing the rank of each team, itself included"""
        return [float(sum(1 for other in team_ratings if other.rank == team.rank)) for team in team_ratings]

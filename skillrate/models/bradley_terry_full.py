"""Weng/Lin Bayesian Online Rating system, Bradley Terry Edition, every pair of teams compared"""
import math
from typing import List, Optional, Sequence
from skillrate.core.base import RatingModel, zip_without_self
from skillrate.core.rating import Rating, to_team_ratings
from skillrate.utils.math_utils import score, sigmoid_scalar


class BradleyTerryFull(RatingModel):
    """The Bayesian Online Rating System introduced by Weng and Lin with logistic pairwise comparisons"""

    def rate(self, teams: Sequence[Sequence[Rating]], ranks: Optional[Sequence[int]] = None) -> List[List[Rating]]:
        team_ratings = to_team_ratings(teams, ranks)
        num_teams = float(len(team_ratings))

        new_teams = []
        for team_i, others in zip_without_self(team_ratings):
            omega = 0.0
            delta = 0.0
            for team_q in others:
                combined_dev = math.sqrt(team_i.sigma_sq + team_q.sigma_sq + self.two_beta_squared)
                prob = sigmoid_scalar((team_i.mu - team_q.mu) / combined_dev)
                sigma_sq_to_dev = team_i.sigma_sq / combined_dev
                gamma = self.gamma(combined_dev, num_teams, team_i)
                omega += sigma_sq_to_dev * (score(team_q.rank, team_i.rank) - prob)
                delta += ((gamma * sigma_sq_to_dev) / combined_dev) * prob * (1.0 - prob)
            new_teams.append(self.update_team_rating(team_i, omega, delta))
        return new_teams

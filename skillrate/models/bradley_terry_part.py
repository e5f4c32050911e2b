"""Weng/Lin Bayesian Online Rating system, Bradley Terry Edition, only adjacent teams compared"""
import math
from typing import List, Optional, Sequence
from skillrate.core.base import RatingModel
from skillrate.core.rating import Rating, ladder_pairs, to_team_ratings
from skillrate.utils.math_utils import score, sigmoid_scalar


class BradleyTerryPart(RatingModel):
    """
    Bradley-Terry updates where each team is only compared with the team listed directly before
    and directly after it. Cheaper than the full model for large free for alls and much less
    aggressive in how far it moves the teams in the middle of the ladder.
    """

    def rate(self, teams: Sequence[Sequence[Rating]], ranks: Optional[Sequence[int]] = None) -> List[List[Rating]]:
        team_ratings = to_team_ratings(teams, ranks)
        num_teams = float(len(team_ratings))

        new_teams = []
        for team_i, neighbours in zip(team_ratings, ladder_pairs(team_ratings)):
            omega = 0.0
            delta = 0.0
            for team_q in neighbours:
                combined_dev = math.sqrt(team_i.sigma_sq + team_q.sigma_sq + self.two_beta_squared)
                prob = sigmoid_scalar((team_i.mu - team_q.mu) / combined_dev)
                sigma_sq_to_dev = team_i.sigma_sq / combined_dev
                gamma = self.gamma(combined_dev, num_teams, team_i)
                omega += sigma_sq_to_dev * (score(team_q.rank, team_i.rank) - prob)
                delta += ((gamma * sigma_sq_to_dev) / combined_dev) * prob * (1.0 - prob)
            new_teams.append(self.update_team_rating(team_i, omega, delta))
        return new_teams

"""Weng/Lin Bayesian Online Rating system, Thurstone Mosteller Edition, only adjacent teams compared"""
import math
from typing import List, Optional, Sequence
from skillrate.core.base import RatingModel
from skillrate.core.rating import Rating, ladder_pairs, to_team_ratings
from skillrate.utils.math_utils import v, vt, w, wt


class ThurstoneMostellerPart(RatingModel):
    """Thurstone-Mosteller updates restricted to the neighbouring teams on the ladder"""

    def rate(self, teams: Sequence[Sequence[Rating]], ranks: Optional[Sequence[int]] = None) -> List[List[Rating]]:
        team_ratings = to_team_ratings(teams, ranks)
        num_teams = float(len(team_ratings))

        new_teams = []
        for team_i, neighbours in zip(team_ratings, ladder_pairs(team_ratings)):
            omega = 0.0
            delta = 0.0
            for team_q in neighbours:
                # the partial model uses twice the combined deviation
                combined_dev = 2.0 * math.sqrt(team_i.sigma_sq + team_q.sigma_sq + self.two_beta_squared)
                norm_diff = (team_i.mu - team_q.mu) / combined_dev
                eps = self.kappa / combined_dev
                sigma_sq_to_dev = team_i.sigma_sq / combined_dev
                gamma = self.gamma(combined_dev, num_teams, team_i)
                if team_q.rank == team_i.rank:
                    omega += sigma_sq_to_dev * vt(norm_diff, eps)
                    delta += ((gamma * sigma_sq_to_dev) / combined_dev) * wt(norm_diff, eps)
                else:
                    sign = 1.0 if team_q.rank > team_i.rank else -1.0
                    omega += sign * sigma_sq_to_dev * v(sign * norm_diff, eps)
                    delta += ((gamma * sigma_sq_to_dev) / combined_dev) * w(sign * norm_diff, eps)
            new_teams.append(self.update_team_rating(team_i, omega, delta))
        return new_teams

"""Environment holding the rating parameters and the chosen update rule"""
import logging
import math
from typing import List, Optional, Sequence
from skillrate.core.base import RatingModel
from skillrate.core.rating import GameResult, GammaFunc, OrdinalFunc, Rating, default_gamma, default_ordinal
from skillrate.core.validate import validate_ranks, validate_teams
from skillrate.models import ModelKind, build_model, parse_model_kind
from skillrate.predict import predict_draw, predict_win
from skillrate.utils.constants import DEFAULT_MU, DEFAULT_Z, KAPPA

logger = logging.getLogger(__name__)


class Env:
    """
    Entry point for rating matches and predicting their outcomes.

    All parameters are fixed at construction and exposed as read only properties, so one Env can
    be shared freely, including between threads. Every call is a pure function of its inputs.

    Attributes:
        mu (float): mean of a new player's rating.
        z (float): number of standard deviations subtracted by the ordinal.
        sigma (float): standard deviation of a new player's rating.
        beta (float): standard deviation of a single performance around the true skill.
        kappa (float): lower bound on the variance multiplier after an update.
        model_kind (ModelKind): the update rule in use.
    """

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        z: float = DEFAULT_Z,
        sigma: Optional[float] = None,
        beta: Optional[float] = None,
        kappa: float = KAPPA,
        gamma: GammaFunc = default_gamma,
        ordinal: OrdinalFunc = default_ordinal,
        model=ModelKind.PLACKETT_LUCE,
    ):
        """
        Parameters:
            mu (float, optional): initial mean. Defaults to 25.0.
            z (float, optional): ordinal multiplier. Defaults to 3.0.
            sigma (float, optional): initial deviation. Defaults to mu / z.
            beta (float, optional): performance deviation. Defaults to sigma / 2.
            kappa (float, optional): variance multiplier floor. Defaults to 0.0001.
            gamma (GammaFunc, optional): variance shrink policy, gamma(c, num_teams, team) -> float.
            ordinal (OrdinalFunc, optional): conservative score, ordinal(rating, z) -> float.
            model (ModelKind or str, optional): update rule. Defaults to Plackett-Luce.
        """
        self._mu = mu
        self._z = z
        self._sigma = sigma if sigma is not None else mu / z
        self._beta = beta if beta is not None else self._sigma / 2.0
        self._kappa = kappa
        self._gamma = gamma
        self._ordinal_func = ordinal
        self._model_kind = parse_model_kind(model)
        self._model = build_model(self._model_kind, beta=self._beta, kappa=self._kappa, gamma=self._gamma)
        logger.debug(
            'built Env(model=%s, mu=%s, sigma=%s, beta=%s, kappa=%s, z=%s)',
            self._model_kind.value,
            self._mu,
            self._sigma,
            self._beta,
            self._kappa,
            self._z,
        )

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def z(self) -> float:
        return self._z

    @property
    def sigma(self) -> float:
        return self._sigma

    @property
    def beta(self) -> float:
        return self._beta

    @property
    def kappa(self) -> float:
        return self._kappa

    @property
    def gamma(self) -> GammaFunc:
        return self._gamma

    @property
    def ordinal_func(self) -> OrdinalFunc:
        return self._ordinal_func

    @property
    def model_kind(self) -> ModelKind:
        return self._model_kind

    @property
    def model(self) -> RatingModel:
        """the update rule, built once from beta, kappa and gamma"""
        return self._model

    @classmethod
    def from_config(cls, config: dict) -> 'Env':
        """
        Builds an Env from a plain dict of parameters, for example one loaded from a json or yaml file.

        Recognized keys are the constructor arguments: mu, z, sigma, beta, kappa, gamma, ordinal and model.
        """
        allowed = {'mu', 'z', 'sigma', 'beta', 'kappa', 'gamma', 'ordinal', 'model'}
        unknown = sorted(set(config) - allowed)
        if unknown:
            raise ValueError(f'Unknown Env parameters: {", ".join(unknown)}')
        return cls(**config)

    def __repr__(self):
        return (
            f'Env(model={self.model_kind.value!r}, mu={self.mu}, sigma={self.sigma}, '
            f'beta={self.beta}, kappa={self.kappa}, z={self.z})'
        )

    def new_rating(self) -> Rating:
        return Rating(mu=self.mu, sigma=self.sigma)

    def ordinal(self, rating: Rating) -> float:
        return self.ordinal_func(rating, self.z)

    def _check(self, result: GameResult) -> bool:
        """validates the result and reports whether there is anything to compare"""
        validate_teams(result.teams, empty_reason='0')
        validate_ranks(result.teams, result.ranks)
        if len(result.teams) < 2:
            logger.debug('only %d team in result, ratings are unchanged', len(result.teams))
            return False
        return True

    def rate(self, result: GameResult) -> List[List[Rating]]:
        """
        Computes the ratings of every player after the match.

        Parameters:
            result (GameResult): the teams and their finishing ranks

        Returns:
            list of lists of Rating shaped like result.teams. A single team is returned unchanged.

        Raises:
            InvalidTeamCountError: no teams were given, or the number of ranks does not match
            EmptyTeamsError: a team has no players
        """
        if not self._check(result):
            return [list(team) for team in result.teams]
        return self.model.rate(result.teams, result.ranks)

    def rate_with_tau(self, result: GameResult, tau: float) -> List[List[Rating]]:
        """
        Same as rate but first widens every sigma to sqrt(sigma^2 + tau^2), modelling skill drift since the last match.
        """
        if not self._check(result):
            return [list(team) for team in result.teams]
        tau_squared = tau**2.0
        teams = [
            [Rating(mu=member.mu, sigma=math.sqrt(member.sigma**2.0 + tau_squared)) for member in team]
            for team in result.teams
        ]
        return self.model.rate(teams, result.ranks)

    def predict_draw(self, teams: Sequence[Sequence[Rating]]) -> float:
        return predict_draw(teams, self.beta)

    def predict_win(self, teams: Sequence[Sequence[Rating]]) -> List[float]:
        return predict_win(teams, self.beta)

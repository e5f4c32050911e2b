"""
Models Module
=============

This module contains the update rules used to turn the observed finishing order of a match into new
skill ratings. All of them are closed form approximations of the Bayesian posterior from
"A Bayesian Approximation Method for Online Ranking" by Weng and Lin, and they share one contract:
take the teams (sequences of member ratings) and their ranks, return new ratings of the same shape.

Included Rating Models:
- Plackett-Luce: Compares each team with all teams finishing at or behind it using a softmax over team strengths.
- Bradley-Terry Full: Logistic pairwise comparisons between every pair of teams.
- Bradley-Terry Part: Logistic pairwise comparisons between teams that are adjacent on the ladder.
- Thurstone-Mosteller Full: Gaussian pairwise comparisons between every pair of teams, with explicit draws.
- Thurstone-Mosteller Part: Gaussian pairwise comparisons between teams that are adjacent on the ladder.

The set of models is closed, `ModelKind` enumerates it and `build_model` constructs one from a kind.
"""
from enum import Enum
from skillrate.core.base import RatingModel
from skillrate.core.rating import GammaFunc, default_gamma
from skillrate.models.bradley_terry_full import BradleyTerryFull
from skillrate.models.bradley_terry_part import BradleyTerryPart
from skillrate.models.plackett_luce import PlackettLuce
from skillrate.models.thurstone_mosteller_full import ThurstoneMostellerFull
from skillrate.models.thurstone_mosteller_part import ThurstoneMostellerPart
from skillrate.utils.constants import DEFAULT_BETA, KAPPA


class ModelKind(str, Enum):
    """the available update rules, the values are the names accepted in config dicts"""

    PLACKETT_LUCE = 'pl'
    BRADLEY_TERRY_FULL = 'bt_full'
    BRADLEY_TERRY_PART = 'bt_part'
    THURSTONE_MOSTELLER_FULL = 'tm_full'
    THURSTONE_MOSTELLER_PART = 'tm_part'


MODELS = {
    ModelKind.PLACKETT_LUCE: PlackettLuce,
    ModelKind.BRADLEY_TERRY_FULL: BradleyTerryFull,
    ModelKind.BRADLEY_TERRY_PART: BradleyTerryPart,
    ModelKind.THURSTONE_MOSTELLER_FULL: ThurstoneMostellerFull,
    ModelKind.THURSTONE_MOSTELLER_PART: ThurstoneMostellerPart,
}


def parse_model_kind(kind) -> ModelKind:
    """accepts a ModelKind or its value such as 'bt_full'"""
    if isinstance(kind, ModelKind):
        return kind
    try:
        return ModelKind(kind)
    except ValueError:
        valid = ', '.join(repr(member.value) for member in ModelKind)
        raise ValueError(f'Invalid model {kind!r}, expected one of {valid}') from None


def build_model(
    kind=ModelKind.PLACKETT_LUCE,
    beta: float = DEFAULT_BETA,
    kappa: float = KAPPA,
    gamma: GammaFunc = default_gamma,
) -> RatingModel:
    """
    Parameters:
        kind (ModelKind or str): which update rule to use, either a ModelKind or its value such as 'bt_full'
        beta (float, optional): performance deviation. Defaults to 25/6.
        kappa (float, optional): variance multiplier floor. Defaults to 0.0001.
        gamma (GammaFunc, optional): variance shrink policy.
    """
    return MODELS[parse_model_kind(kind)](beta=beta, kappa=kappa, gamma=gamma)


__all__ = [
    'ModelKind',
    'MODELS',
    'build_model',
    'parse_model_kind',
    'PlackettLuce',
    'BradleyTerryFull',
    'BradleyTerryPart',
    'ThurstoneMostellerFull',
    'ThurstoneMostellerPart',
]

"""
skillrate
=========

Bayesian online skill ratings for multi team matches following Weng and Lin.

Usage:
    from skillrate import Env, GameResult, Rating
    env = Env(model="bt_full")
    new_ratings = env.rate(GameResult(teams=[[Rating()], [Rating()]], ranks=[1, 2]))
"""
from skillrate.core.errors import EmptyTeamsError, InvalidTeamCountError, SkillRateError
from skillrate.core.rating import GameResult, Rating, TeamRating, default_gamma, default_ordinal
from skillrate.env import Env
from skillrate.models import ModelKind
from skillrate.predict import predict_draw, predict_win

__all__ = [
    'Env',
    'GameResult',
    'Rating',
    'TeamRating',
    'ModelKind',
    'default_gamma',
    'default_ordinal',
    'predict_draw',
    'predict_win',
    'SkillRateError',
    'EmptyTeamsError',
    'InvalidTeamCountError',
]

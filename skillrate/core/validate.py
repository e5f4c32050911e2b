"""input checks run before any numeric work"""
import logging
from typing import Optional, Sequence
from skillrate.core.errors import EmptyTeamsError, InvalidTeamCountError

logger = logging.getLogger(__name__)

TEAM_MUST_CONTAIN_PLAYER = 'team must contain at least 1 player'


def validate_teams(teams: Sequence[Sequence], empty_reason: str = TEAM_MUST_CONTAIN_PLAYER):
    """
    Rejects an empty team list or any team without members.

    Parameters:
        teams: the teams to check, each a sequence of ratings
        empty_reason (str): reason attached to the error raised for an empty team list
    """
    if len(teams) == 0:
        logger.debug('rejecting empty team list')
        raise InvalidTeamCountError(empty_reason)
    for idx, team in enumerate(teams):
        if len(team) == 0:
            logger.debug('rejecting team %d with no players', idx)
            raise EmptyTeamsError(idx)


def validate_ranks(teams: Sequence[Sequence], ranks: Optional[Sequence[int]]):
    """ranks are optional but when given there must be exactly one per team"""
    if ranks is not None and len(ranks) != len(teams):
        logger.debug('got %d ranks for %d teams', len(ranks), len(teams))
        raise InvalidTeamCountError(f'{len(teams)} teams but {len(ranks)} ranks')

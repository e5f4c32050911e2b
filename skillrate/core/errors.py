"""exceptions raised when a match description cannot be rated or predicted"""


class SkillRateError(ValueError):
    """Base class for invalid rating inputs."""


class EmptyTeamsError(SkillRateError):
    """Raised when a team in the input has no members."""

    def __init__(self, index=None):
        self.index = index
        message = 'Empty teams'
        if index is not None:
            message += f' (team at position {index} has no players)'
        super().__init__(message)


class InvalidTeamCountError(SkillRateError):
    """
    Raised when the list of teams cannot be used at all.

    Attributes:
        reason (str): why the team count was rejected, e.g. "0" for an empty team list
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f'Invalid team count {reason}')

# errors.py
class TeamRosterError(RuntimeError):
    """Base class for errors raised by team_roster itself (not by the database driver)."""


class DeliberateRollbackError(TeamRosterError):
    """Raised on purpose while saving a team to force the enclosing transaction to roll back."""

    def __init__(self, team_name: str) -> None:
        super().__init__(f"Name of team was {team_name}")
        self.team_name = team_name


class TransientMemberError(TeamRosterError):
    """A team member has no id yet; persons must be saved before joining a team."""

    def __init__(self, team_name: str, person_name: str) -> None:
        super().__init__(f"Member {person_name!r} of team {team_name!r} has no id")
        self.team_name = team_name
        self.person_name = person_name

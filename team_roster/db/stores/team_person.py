# db/stores/team_person.py
import logging
from typing import List

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from team_roster.db.mappers import team_person_from_row
from team_roster.db.models.team_person import TeamPerson as TeamPersonModel
from team_roster.db.schemas.team_person import TeamPerson

logger = logging.getLogger(__name__)


class TeamPersonStore:
    """
    Team -> Person mapping table. Never commits; the caller owns the session.
    """

    def insert(self, s: Session, team_person: TeamPerson) -> None:
        """
        Insert one membership row.

        Raises:
            IntegrityError: if the pair already exists or either id does not
                reference an existing row.
        """
        s.execute(
            insert(TeamPersonModel).values(
                team_id=team_person.team_id,
                person_id=team_person.person_id,
            )
        )
        logger.debug("Inserted team_person (%s, %s)", team_person.team_id, team_person.person_id)

    def find_by_team_id(self, s: Session, team_id: int) -> List[TeamPerson]:
        stmt = (
            select(TeamPersonModel.team_id, TeamPersonModel.person_id)
            .where(TeamPersonModel.team_id == team_id)
            .order_by(TeamPersonModel.person_id.asc())
        )
        return [team_person_from_row(r) for r in s.execute(stmt)]

    def delete(self, s: Session, team_person: TeamPerson) -> bool:
        """
        Delete the matching row. Deleting a missing pair is a no-op.

        Returns:
            bool: True if a row was removed.
        """
        res = s.execute(
            delete(TeamPersonModel).where(
                TeamPersonModel.team_id == team_person.team_id,
                TeamPersonModel.person_id == team_person.person_id,
            )
        )
        removed = res.rowcount > 0
        if not removed:
            logger.debug("team_person (%s, %s) already absent", team_person.team_id, team_person.person_id)
        return removed

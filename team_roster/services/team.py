# services/team.py
import logging
from typing import Dict, List, Optional

from team_roster.db.database import DataBase
from team_roster.db.schemas.team import Team
from team_roster.db.schemas.team_person import TeamPerson
from team_roster.db.stores.person import PersonLookup
from team_roster.db.stores.team import TeamStore
from team_roster.db.stores.team_person import TeamPersonStore
from team_roster.errors import DeliberateRollbackError, TransientMemberError

logger = logging.getLogger(__name__)

# Saving a new team under this name aborts the insert after all rows are written.
FAILURE_SENTINEL_NAME = "FAIL"


def check_if_tx_should_be_rolled_back(team: Team) -> None:
	if team.name == FAILURE_SENTINEL_NAME:
		raise DeliberateRollbackError(team.name)


def check_members_are_persisted(team: Team) -> None:
	for person in team.members:
		if person.id is None:
			raise TransientMemberError(team.name, person.name)


class TeamRepository:
	"""
	Team aggregates: the ``team`` row plus its members from ``team_person``.

	Person rows are never written here; members are resolved through the
	injected PersonLookup. Writes touching both tables run inside one
	``DataBase.session()`` block, and the same session is handed to both stores.
	"""

	def __init__(self, database: DataBase, persons: PersonLookup) -> None:
		self._database = database
		self._persons = persons
		self._team_store = TeamStore()
		self._team_person_store = TeamPersonStore()

	def save(self, team: Team) -> Optional[Team]:
		"""
		Insert (``team.id is None``) or update the team and its memberships.

		Returns:
			Optional[Team]: The aggregate as re-read after commit. None only when
			an update targeted an id that does not exist.

		Raises:
			IntegrityError: On constraint violations; nothing is committed.
			TransientMemberError: When a member has no id; raised before any write.
			DeliberateRollbackError: When a new team carries the failure sentinel name.
		"""
		check_members_are_persisted(team)
		if team.id is None:
			team_id = self._insert(team)
		else:
			team_id = self._update(team)
		return self.get(team_id)

	def _insert(self, team: Team) -> int:
		with self._database.session() as s:
			team_id = self._team_store.insert(s, team)
			for person in team.members:
				self._team_person_store.insert(s, TeamPerson(team_id=team_id, person_id=person.id))
			check_if_tx_should_be_rolled_back(team)

		logger.info("Inserted team %s (%r) with %d member(s)", team_id, team.name, len(team.members))
		return team_id

	def _update(self, team: Team) -> int:
		with self._database.session() as s:
			self._team_store.update(s, team)
			# Additive only: rows for members missing from team.members are kept.
			existing = set(self._team_person_store.find_by_team_id(s, team.id))
			for person in team.members:
				membership = TeamPerson(team_id=team.id, person_id=person.id)
				if membership not in existing:
					self._team_person_store.insert(s, membership)
					existing.add(membership)

		logger.info("Updated team %s (%r)", team.id, team.name)
		return team.id

	def get(self, team_id: int) -> Optional[Team]:
		with self._database.session() as s:
			team = self._team_store.get(s, team_id)
			if team is None:
				return None
			memberships = self._team_person_store.find_by_team_id(s, team_id)

		return self._hydrate(team, memberships)

	def find_by_name(self, name: str) -> Optional[Team]:
		with self._database.session() as s:
			matches = self._team_store.find_by_name(s, name)

		if not matches:
			return None
		return self.get(matches[0].id)

	def get_all(self) -> List[Team]:
		with self._database.session() as s:
			teams = self._team_store.get_all(s)
			memberships: Dict[int, List[TeamPerson]] = {
				team.id: self._team_person_store.find_by_team_id(s, team.id) for team in teams
			}

		return [self._hydrate(team, memberships[team.id]) for team in teams]

	def count(self) -> int:
		with self._database.session() as s:
			return self._team_store.count(s)

	def exists(self, team_id: int) -> bool:
		# Full hydration, not a cheap probe.
		return self.get(team_id) is not None

	def delete(self, team_id: int) -> None:
		"""
		Delete the team and all its memberships in one transaction. Person rows
		are left alone. Deleting a missing team is a no-op.
		"""
		team = self.get(team_id)
		if team is None:
			return

		with self._database.session() as s:
			for membership in self._team_person_store.find_by_team_id(s, team.id):
				self._team_person_store.delete(s, membership)
			self._team_store.delete(s, team.id)

		logger.info("Deleted team %s (%r)", team.id, team.name)

	def remove_member(self, team_id: int, person_id: int) -> bool:
		with self._database.session() as s:
			removed = self._team_person_store.delete(s, TeamPerson(team_id=team_id, person_id=person_id))

		if removed:
			logger.info("Removed person %s from team %s", person_id, team_id)
		return removed

	def _hydrate(self, team: Team, memberships: List[TeamPerson]) -> Team:
		for membership in memberships:
			person = self._persons.get(membership.person_id)
			if person is None:
				logger.warning(
					"Team %s references person %s which could not be resolved",
					membership.team_id, membership.person_id,
				)
				continue
			team.add_member(person)
		return team

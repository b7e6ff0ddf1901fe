"""
Assignment merging for new tasks.

People can reach a task through a selected team or by being picked
individually. Both lists are merged into one entry per person: team entries
are recorded first and are never overwritten, so someone selected both ways
ends up assigned through the team.
"""

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Optional

from .schemas import TeamRef, UserRef

TEAM = "team"
INDIVIDUAL = "individual"


@dataclass(frozen=True)
class AssigneeEntry:
    user_id: str
    email: str
    assignment_type: str
    name: Optional[str] = None
    surname: Optional[str] = None
    team_id: Optional[str] = None
    team_name: Optional[str] = None
    team_code: Optional[str] = None
    team_color: Optional[str] = None


def find_owning_team(
    user_id: str,
    teams: list[TeamRef],
    memberships: Mapping[str, Collection[str]],
) -> Optional[TeamRef]:
    """
    First selected team, in list order, whose membership includes the user.

    A user belonging to several selected teams is attributed to the earliest
    one. When no selected team lists the user, the first selected team is
    used; with no teams selected there is no owning team.
    """
    for team in teams:
        if user_id in memberships.get(team.id, ()):
            return team
    return teams[0] if teams else None


def merge_assignees(
    teams: list[TeamRef],
    team_users: list[UserRef],
    individual_users: list[UserRef],
    memberships: Optional[Mapping[str, Collection[str]]] = None,
) -> list[AssigneeEntry]:
    """Merge team and individual selections into one entry per distinct user id"""
    memberships = memberships or {}
    merged: dict[str, AssigneeEntry] = {}

    for user in team_users:
        if user.id in merged:
            continue
        team = find_owning_team(user.id, teams, memberships)
        merged[user.id] = AssigneeEntry(
            user_id=user.id,
            email=user.email,
            name=user.name,
            surname=user.surname,
            assignment_type=TEAM,
            team_id=team.id if team else None,
            team_name=team.name if team else None,
            team_code=team.code if team else None,
            team_color=team.color if team else None,
        )

    for user in individual_users:
        if user.id not in merged:
            merged[user.id] = AssigneeEntry(
                user_id=user.id,
                email=user.email,
                name=user.name,
                surname=user.surname,
                assignment_type=INDIVIDUAL,
            )

    return list(merged.values())

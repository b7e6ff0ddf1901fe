"""Task repository - Database operations for tasks, templates and categories"""

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from ...models import Task, TaskCategory, TaskDetail, Team, TeamMember


class TaskRepository:
    """Repository for task database operations"""

    @staticmethod
    def get_category_by_name(db: Session, company_id: str, name: str) -> Optional[TaskCategory]:
        """Exact (case-sensitive) category lookup within a company"""
        return (
            db.query(TaskCategory)
            .filter(TaskCategory.company_id == company_id, TaskCategory.name == name)
            .first()
        )

    @staticmethod
    def get_task_detail(db: Session, task_detail_id: str, company_id: str) -> Optional[TaskDetail]:
        return (
            db.query(TaskDetail)
            .filter(TaskDetail.id == task_detail_id, TaskDetail.company_id == company_id)
            .first()
        )

    @staticmethod
    def get_team_memberships(
        db: Session, company_id: str, team_ids: list[str]
    ) -> dict[str, set[str]]:
        """
        Map each of the company's teams among team_ids to the ids of its members.

        Team ids that belong to another company (or do not exist) are left out.
        """
        if not team_ids:
            return {}

        company_team_ids = [
            team_id
            for (team_id,) in db.query(Team.id).filter(
                Team.id.in_(team_ids), Team.company_id == company_id
            )
        ]
        memberships: dict[str, set[str]] = {team_id: set() for team_id in company_team_ids}
        if not company_team_ids:
            return memberships

        rows = db.query(TeamMember.team_id, TeamMember.user_id).filter(
            TeamMember.team_id.in_(company_team_ids)
        )
        for team_id, user_id in rows:
            memberships[team_id].add(user_id)
        return memberships

    @staticmethod
    def get_tasks(db: Session, company_id: str) -> list[Task]:
        """Get all tasks for a company, newest first"""
        return (
            db.query(Task)
            .options(selectinload(Task.assignments))
            .filter(Task.company_id == company_id)
            .order_by(Task.created_at.desc())
            .all()
        )

    @staticmethod
    def get_task_by_id(db: Session, task_id: str, company_id: str) -> Optional[Task]:
        return (
            db.query(Task)
            .options(selectinload(Task.assignments))
            .filter(Task.id == task_id, Task.company_id == company_id)
            .first()
        )

    @staticmethod
    def update_task(db: Session, task: Task, **updates) -> Task:
        """Update a task with provided fields"""
        for key, value in updates.items():
            if hasattr(task, key):
                setattr(task, key, value)

        db.commit()
        db.refresh(task)
        return task

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate a UUID string primary key"""
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=True)
    surname = Column(String(255), nullable=True)
    avatar = Column(String(500), nullable=True)
    google_id = Column(String(255), unique=True, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    memberships = relationship("CompanyUser", back_populates="user")


class Company(Base):
    __tablename__ = "companies"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    address = Column(String(500), nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    members = relationship("CompanyUser", back_populates="company")


class CompanyUser(Base):
    __tablename__ = "company_users"
    __table_args__ = (UniqueConstraint("company_id", "user_id", name="uq_company_user"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    company = relationship("Company", back_populates="members")
    user = relationship("User", back_populates="memberships")


class Contact(Base):
    """Customer of a company"""

    __tablename__ = "contacts"

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    contact_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class Project(Base):
    """A case opened for a contact"""

    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    contact_id = Column(String(36), ForeignKey("contacts.id"), nullable=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class Team(Base):
    __tablename__ = "teams"

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    code = Column(String(50), nullable=False)
    color = Column(String(7), nullable=True)  # Hex color code, e.g. #00C4B4

    members = relationship("TeamMember", back_populates="team")


class TeamMember(Base):
    __tablename__ = "team_members"
    __table_args__ = (UniqueConstraint("team_id", "user_id", name="uq_team_member"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    team_id = Column(String(36), ForeignKey("teams.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    team = relationship("Team", back_populates="members")


class WorkingOrder(Base):
    """Umbrella order that tasks of a project are grouped and billed under"""

    __tablename__ = "working_orders"

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    contact_id = Column(String(36), ForeignKey("contacts.id"), nullable=False)
    project_id = Column(String(36), ForeignKey("projects.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)  # Soft delete flag
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    task_details = relationship("TaskDetail", back_populates="working_order")
    tasks = relationship("Task", back_populates="working_order")


class TaskCategory(Base):
    __tablename__ = "task_categories"
    __table_args__ = (UniqueConstraint("company_id", "name", name="uq_task_category_name"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)


class TaskDetail(Base):
    """Reusable description of work: title, instructions and category"""

    __tablename__ = "task_details"

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    contact_id = Column(String(36), ForeignKey("contacts.id"), nullable=False)
    project_id = Column(String(36), ForeignKey("projects.id"), nullable=False)
    working_order_id = Column(String(36), ForeignKey("working_orders.id"), nullable=False)
    category_id = Column(String(36), ForeignKey("task_categories.id"), nullable=True)
    # Stored verbatim even when no category row matches
    category_name = Column(String(255), nullable=True)
    title = Column(String(255), nullable=False)
    instructions = Column(JSON, default=list, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    working_order = relationship("WorkingOrder", back_populates="task_details")


class Task(Base):
    """
    Concrete unit of work instantiated from a TaskDetail.

    instructions, category_name and task_detail_title are copied when the task
    is created and are never re-synchronized with the template.
    """

    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=generate_id)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    contact_id = Column(String(36), ForeignKey("contacts.id"), nullable=False)
    project_id = Column(String(36), ForeignKey("projects.id"), nullable=False)
    working_order_id = Column(String(36), ForeignKey("working_orders.id"), nullable=False)
    task_detail_id = Column(String(36), ForeignKey("task_details.id"), nullable=False)
    category_id = Column(String(36), ForeignKey("task_categories.id"), nullable=True)
    category_name = Column(String(255), nullable=True)
    task_detail_title = Column(String(255), nullable=False)
    instructions = Column(JSON, default=list, nullable=False)
    instructions_completed = Column(JSON, default=list, nullable=False)  # Same length as instructions

    # Scheduling
    schedule_enabled = Column(Boolean, default=False, nullable=False)
    shift_type = Column(String(50), nullable=True)
    scheduled_date = Column(Date, nullable=True)
    start_time = Column(String(10), nullable=True)  # HH:MM format
    end_time = Column(String(10), nullable=True)
    is_repeating = Column(Boolean, default=False, nullable=False)
    repeat_frequency = Column(String(50), nullable=True)  # Recorded only, never expanded
    repeat_end_date = Column(Date, nullable=True)

    # Status workflow: open → in_progress → completed (cancelled from open/in_progress)
    status = Column(String(50), default="open", nullable=False, index=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    working_order = relationship("WorkingOrder", back_populates="tasks")
    task_detail = relationship("TaskDetail")
    assignments = relationship(
        "TaskAssignment", back_populates="task", order_by="TaskAssignment.position"
    )


class TaskAssignment(Base):
    """One row per distinct person assigned to a task"""

    __tablename__ = "task_assignments"
    __table_args__ = (UniqueConstraint("task_id", "user_id", name="uq_task_assignment_user"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    task_id = Column(String(36), ForeignKey("tasks.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    team_id = Column(String(36), ForeignKey("teams.id"), nullable=True)

    # Denormalized at assignment time
    user_name = Column(String(255), nullable=True)
    user_surname = Column(String(255), nullable=True)
    user_email = Column(String(255), nullable=False)
    team_name = Column(String(255), nullable=True)
    team_code = Column(String(50), nullable=True)
    team_color = Column(String(7), nullable=True)
    assignment_type = Column(String(20), nullable=False)  # team or individual
    position = Column(Integer, nullable=False, default=0)  # Merge order within the task
    created_at = Column(DateTime, server_default=func.now())

    task = relationship("Task", back_populates="assignments")

from __future__ import annotations

import logging
import threading

from skillmatch.schemas import Employee, JobRole
from skillmatch.services.session_service import SessionContext, can_edit

logger = logging.getLogger(__name__)


class NotAuthorizedError(PermissionError):
    pass


def parse_skills(skills_text: str) -> list[str]:
    """Split comma separated tags, trimming each one and dropping blanks."""
    tags: list[str] = []
    for raw in (skills_text or "").split(","):
        tag = raw.strip()
        if tag:
            tags.append(tag)
    return tags


class SkillRegistry:
    """Append-only store of employees and job roles for one dashboard.

    Id assignment and append share one lock; handlers may call in from
    several threads.
    """

    def __init__(self) -> None:
        self._employees: list[Employee] = []
        self._job_roles: list[JobRole] = []
        self._lock = threading.Lock()

    @property
    def employees(self) -> list[Employee]:
        with self._lock:
            return list(self._employees)

    @property
    def job_roles(self) -> list[JobRole]:
        with self._lock:
            return list(self._job_roles)

    def add_employee(self, session: SessionContext | None, name: str, skills_text: str) -> Employee | None:
        _require_editor(session, "employee")

        name = (name or "").strip()
        skills = parse_skills(skills_text)
        if not name or not skills:
            return None

        with self._lock:
            employee = Employee(id=len(self._employees) + 1, name=name, skills=tuple(skills))
            self._employees.append(employee)
        logger.info("Added employee %s (%s) with %d skills", employee.id, employee.name, len(skills))
        return employee

    def add_job_role(self, session: SessionContext | None, title: str, skills_text: str) -> JobRole | None:
        _require_editor(session, "job role")

        title = (title or "").strip()
        skills = parse_skills(skills_text)
        if not title or not skills:
            return None

        with self._lock:
            job_role = JobRole(id=len(self._job_roles) + 1, title=title, required_skills=tuple(skills))
            self._job_roles.append(job_role)
        logger.info("Added job role %s (%s) with %d required skills", job_role.id, job_role.title, len(skills))
        return job_role


def _require_editor(session: SessionContext | None, kind: str) -> None:
    if can_edit(session):
        return

    username = session.user.username if session and session.user else None
    logger.warning("Rejected %s append from %s", kind, username or "anonymous user")
    raise NotAuthorizedError(f"Only admins can add a {kind}")

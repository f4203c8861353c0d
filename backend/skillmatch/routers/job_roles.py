from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from skillmatch.deps import require_login
from skillmatch.schemas import JobRole, JobRoleCreateIn, JobRoleListOut
from skillmatch.services.dashboard import Dashboard
from skillmatch.services.registry import NotAuthorizedError

router = APIRouter(prefix="/job-roles", tags=["job-roles"])


@router.get("", response_model=JobRoleListOut)
def list_job_roles(dashboard: Dashboard = Depends(require_login)) -> JobRoleListOut:
    return JobRoleListOut(items=dashboard.registry.job_roles)


@router.post("", response_model=JobRole)
def create_job_role(payload: JobRoleCreateIn, dashboard: Dashboard = Depends(require_login)) -> JobRole:
    try:
        job_role = dashboard.registry.add_job_role(dashboard.sessions.session, payload.title, payload.skills)
    except NotAuthorizedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    if not job_role:
        raise HTTPException(status_code=400, detail="Title and required skills are required")
    return job_role

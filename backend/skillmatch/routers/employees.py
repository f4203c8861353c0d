from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from skillmatch.deps import require_login
from skillmatch.schemas import Employee, EmployeeCreateIn, EmployeeListOut
from skillmatch.services.dashboard import Dashboard
from skillmatch.services.registry import NotAuthorizedError

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeeListOut)
def list_employees(dashboard: Dashboard = Depends(require_login)) -> EmployeeListOut:
    return EmployeeListOut(items=dashboard.registry.employees)


@router.post("", response_model=Employee)
def create_employee(payload: EmployeeCreateIn, dashboard: Dashboard = Depends(require_login)) -> Employee:
    try:
        employee = dashboard.registry.add_employee(dashboard.sessions.session, payload.name, payload.skills)
    except NotAuthorizedError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    if not employee:
        raise HTTPException(status_code=400, detail="Name and skills are required")
    return employee

from __future__ import annotations

from fastapi import APIRouter, Depends

from skillmatch.deps import require_login
from skillmatch.schemas import MatchesOut
from skillmatch.services.chart import build_chart_rows, build_chart_series
from skillmatch.services.dashboard import Dashboard
from skillmatch.services.matcher import build_match_matrix

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("", response_model=MatchesOut)
def get_matches(dashboard: Dashboard = Depends(require_login)) -> MatchesOut:
    employees = dashboard.registry.employees
    job_roles = dashboard.registry.job_roles
    matrix = build_match_matrix(employees, job_roles, duplicate_policy=dashboard.duplicate_policy)
    return MatchesOut(
        duplicate_policy=dashboard.duplicate_policy,
        matrix=matrix,
        rows=build_chart_rows(matrix),
        series=build_chart_series(job_roles),
    )

from __future__ import annotations

from collections.abc import Sequence

from skillmatch.config import settings
from skillmatch.schemas import ChartSeries, JobRole, MatchRow


def data_key_for_job_role(job_role_id: int) -> str:
    return f"job_{job_role_id}"


def color_for_job_role(job_role_id: int, palette: Sequence[str] | None = None) -> str:
    colors = list(palette) if palette else settings.chart_palette
    return colors[(job_role_id - 1) % len(colors)]


def build_chart_series(job_roles: Sequence[JobRole], palette: Sequence[str] | None = None) -> list[ChartSeries]:
    return [
        ChartSeries(
            job_role_id=job.id,
            data_key=data_key_for_job_role(job.id),
            title=job.title,
            color=color_for_job_role(job.id, palette),
        )
        for job in job_roles
    ]


def build_chart_rows(matrix: Sequence[MatchRow]) -> list[dict[str, str | float]]:
    """One bar group per employee; each bar is keyed by its series ``data_key``.

    Titles are only labels, so two roles with the same title (or a role
    titled ``name``) never overwrite each other or the employee name.
    """
    rows: list[dict[str, str | float]] = []
    for row in matrix:
        entry: dict[str, str | float] = {"name": row.name}
        for cell in row.matches:
            entry[data_key_for_job_role(cell.job_role_id)] = cell.percent
        rows.append(entry)
    return rows

from __future__ import annotations

from collections.abc import Sequence

from skillmatch.schemas import Employee, JobRole, MatchCell, MatchRow

DUPLICATE_POLICIES = ("occurrences", "capped", "distinct")


def compute_match(
    employee_skills: Sequence[str],
    required_skills: Sequence[str],
    *,
    duplicate_policy: str = "occurrences",
) -> float:
    """Percentage of the required skills covered by the employee's skills.

    Tags are compared with exact, case-sensitive equality. With the default
    ``occurrences`` policy every tag of ``employee_skills`` that appears in
    ``required_skills`` is counted, so repeated tags can push the score above
    100. ``capped`` clamps that result to 100 and ``distinct`` counts each
    employee tag once. An empty ``required_skills`` scores 0.
    """
    if duplicate_policy not in DUPLICATE_POLICIES:
        raise ValueError(f"Unknown duplicate policy: {duplicate_policy}")

    if not required_skills:
        return 0.0

    required = set(required_skills)
    candidates = employee_skills
    if duplicate_policy == "distinct":
        candidates = list(dict.fromkeys(employee_skills))

    matched = sum(1 for skill in candidates if skill in required)
    percent = matched / len(required_skills) * 100
    if duplicate_policy == "capped":
        percent = min(percent, 100.0)

    return round(percent, 2)


def build_match_matrix(
    employees: Sequence[Employee],
    job_roles: Sequence[JobRole],
    *,
    duplicate_policy: str = "occurrences",
) -> list[MatchRow]:
    rows: list[MatchRow] = []
    for employee in employees:
        cells = [
            MatchCell(
                job_role_id=job.id,
                title=job.title,
                percent=compute_match(
                    employee.skills,
                    job.required_skills,
                    duplicate_policy=duplicate_policy,
                ),
            )
            for job in job_roles
        ]
        rows.append(MatchRow(employee_id=employee.id, name=employee.name, matches=cells))
    return rows

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["admin", "employee"]


class Employee(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    skills: tuple[str, ...] = ()


class JobRole(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    required_skills: tuple[str, ...] = ()


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    role: Role


class PasswordResetNotice(BaseModel):
    email: str
    message: str


class LoginIn(BaseModel):
    username: str = ""
    password: str = ""


class RegisterIn(BaseModel):
    username: str = ""
    password: str = ""
    confirm_password: str = ""


class PasswordResetIn(BaseModel):
    email: str = ""


class SessionOut(BaseModel):
    user: User | None = None
    can_edit: bool = False
    greeting: str | None = None


class EmployeeCreateIn(BaseModel):
    name: str = ""
    skills: str = ""


class JobRoleCreateIn(BaseModel):
    title: str = ""
    skills: str = ""


class EmployeeListOut(BaseModel):
    items: list[Employee] = Field(default_factory=list)


class JobRoleListOut(BaseModel):
    items: list[JobRole] = Field(default_factory=list)


class MatchCell(BaseModel):
    job_role_id: int
    title: str
    percent: float


class MatchRow(BaseModel):
    employee_id: int
    name: str
    matches: list[MatchCell] = Field(default_factory=list)


class ChartSeries(BaseModel):
    job_role_id: int
    data_key: str
    title: str
    color: str


class MatchesOut(BaseModel):
    duplicate_policy: str
    matrix: list[MatchRow] = Field(default_factory=list)
    rows: list[dict[str, str | float]] = Field(default_factory=list)
    series: list[ChartSeries] = Field(default_factory=list)

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from skillmatch.deps import get_dashboard
from skillmatch.schemas import LoginIn, PasswordResetIn, PasswordResetNotice, RegisterIn, SessionOut
from skillmatch.services.dashboard import Dashboard
from skillmatch.services.session_service import RegistrationError, SessionContext, can_edit

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/session", response_model=SessionOut)
def get_session(dashboard: Dashboard = Depends(get_dashboard)) -> SessionOut:
    return _to_session_out(dashboard.sessions.session)


@router.post("/login", response_model=SessionOut)
def login(payload: LoginIn, dashboard: Dashboard = Depends(get_dashboard)) -> SessionOut:
    user = dashboard.sessions.login(payload.username, payload.password)
    if not user:
        raise HTTPException(status_code=401, detail="Username and password are required")
    return _to_session_out(dashboard.sessions.session)


@router.post("/register", response_model=SessionOut)
def register(payload: RegisterIn, dashboard: Dashboard = Depends(get_dashboard)) -> SessionOut:
    try:
        dashboard.sessions.register(payload.username, payload.password, payload.confirm_password)
    except RegistrationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _to_session_out(dashboard.sessions.session)


@router.post("/password-reset", response_model=PasswordResetNotice)
def password_reset(payload: PasswordResetIn, dashboard: Dashboard = Depends(get_dashboard)) -> PasswordResetNotice:
    notice = dashboard.sessions.request_password_reset(payload.email)
    if not notice:
        raise HTTPException(status_code=400, detail="Email is required")
    return notice


@router.post("/logout", response_model=SessionOut)
def logout(dashboard: Dashboard = Depends(get_dashboard)) -> SessionOut:
    dashboard.sessions.logout()
    return _to_session_out(dashboard.sessions.session)


def _to_session_out(session: SessionContext) -> SessionOut:
    return SessionOut(user=session.user, can_edit=can_edit(session), greeting=session.greeting)

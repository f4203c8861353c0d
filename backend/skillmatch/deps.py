from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from skillmatch.services.dashboard import Dashboard


def get_dashboard(request: Request) -> Dashboard:
    return request.app.state.dashboard


def require_login(dashboard: Dashboard = Depends(get_dashboard)) -> Dashboard:
    if not dashboard.sessions.session.logged_in:
        raise HTTPException(status_code=401, detail="Login required")
    return dashboard

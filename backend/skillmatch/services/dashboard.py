from __future__ import annotations

from dataclasses import dataclass, field

from skillmatch.config import settings
from skillmatch.services.auth import Authenticator
from skillmatch.services.demo_data import seed_demo_data
from skillmatch.services.matcher import DUPLICATE_POLICIES
from skillmatch.services.registry import SkillRegistry
from skillmatch.services.session_service import SessionManager


@dataclass
class Dashboard:
    sessions: SessionManager
    registry: SkillRegistry = field(default_factory=SkillRegistry)
    duplicate_policy: str = "occurrences"


def build_dashboard(
    *,
    authenticator: Authenticator | None = None,
    seed: bool | None = None,
    duplicate_policy: str | None = None,
) -> Dashboard:
    policy = duplicate_policy if duplicate_policy is not None else settings.match_duplicate_policy
    policy = (policy or "").strip().lower()
    if policy not in DUPLICATE_POLICIES:
        raise ValueError(f"Unknown duplicate policy: {policy}")

    dashboard = Dashboard(
        sessions=SessionManager(authenticator=authenticator),
        duplicate_policy=policy,
    )
    should_seed = seed if seed is not None else settings.seed_demo_data
    if should_seed:
        seed_demo_data(dashboard.registry)
    return dashboard

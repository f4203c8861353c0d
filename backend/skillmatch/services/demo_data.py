from __future__ import annotations

import logging

from skillmatch.schemas import User
from skillmatch.services.registry import SkillRegistry
from skillmatch.services.session_service import SessionContext

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = [
    ("山田太郎", "プロジェクト管理, リーダーシップ, コミュニケーション"),
    ("佐藤花子", "データ分析, プログラミング, 問題解決"),
]

DEMO_JOB_ROLES = [
    ("プロジェクトマネージャー", "プロジェクト管理, リーダーシップ, コミュニケーション"),
    ("データサイエンティスト", "データ分析, プログラミング, 統計学"),
]


def seed_demo_data(registry: SkillRegistry) -> None:
    seeder = SessionContext(User(username="demo-seed", role="admin"))
    for name, skills in DEMO_EMPLOYEES:
        registry.add_employee(seeder, name, skills)
    for title, skills in DEMO_JOB_ROLES:
        registry.add_job_role(seeder, title, skills)
    logger.info(
        "Seeded %d demo employees and %d demo job roles",
        len(DEMO_EMPLOYEES),
        len(DEMO_JOB_ROLES),
    )

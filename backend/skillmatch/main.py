import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillmatch.config import settings
from skillmatch.routers import auth, employees, health, job_roles, matches
from skillmatch.services.dashboard import build_dashboard

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # State is rebuilt on every start; nothing survives a restart.
    app.state.dashboard = build_dashboard()
    logger.info("%s started (%s)", settings.app_name, settings.app_env)

    yield

    app.state.dashboard = None


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(auth.router, prefix="/api")
app.include_router(employees.router, prefix="/api")
app.include_router(job_roles.router, prefix="/api")
app.include_router(matches.router, prefix="/api")

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.middleware.exceptions import register_exception_handlers
from app.models.seed import SeedData
from app.routers import health, schedule, tasks, teams, templates
from app.services.seed import build_seed_data
from app.services.store import InMemoryStore

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger("scheduler")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan: build the process-wide store once at startup."""
    seed = build_seed_data() if settings.seed_on_startup else SeedData()
    app.state.store = InMemoryStore(seed)
    logger.info("Scheduler store initialised (seeded=%s)", settings.seed_on_startup)
    yield
    logger.info("Scheduler shutting down")


app = FastAPI(
    title="Apiary Scheduler",
    description="Task templates, team assignments and weekly calendars for apiary field work",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Exception Handlers ───────────────────────────────────────
register_exception_handlers(app)

# ── Middleware ───────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ──────────────────────────────────────────────────
app.include_router(health.router)
app.include_router(teams.router, prefix="/api/teams", tags=["teams"])
app.include_router(templates.router, prefix="/api/templates", tags=["templates"])
app.include_router(tasks.router, prefix="/api/tasks", tags=["tasks"])
app.include_router(schedule.router, prefix="/api/schedule", tags=["schedule"])

"""Team roster routes. Teams and members are seeded and read-only."""

from fastapi import APIRouter, Depends

from app.deps import get_store
from app.models.team import Member, Team
from app.services.store import InMemoryStore

router = APIRouter()


@router.get("/", response_model=list[Team])
async def list_teams(store: InMemoryStore = Depends(get_store)):
    return store.list_teams()


@router.get("/members", response_model=list[Member])
async def list_members(
    team_id: str | None = None,
    store: InMemoryStore = Depends(get_store),
):
    members = store.list_members()
    if team_id:
        members = [m for m in members if m.team_id == team_id]
    return members

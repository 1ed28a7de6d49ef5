"""Task template routes.

Endpoints:
    GET    /api/templates/                  List templates
    POST   /api/templates/                  Create template (version 1)
    GET    /api/templates/{id}              Detail (with version history)
    POST   /api/templates/{id}/versions     Publish a new version
"""

from fastapi import APIRouter, Body, Depends

from app.deps import get_store
from app.models.template import TaskTemplate
from app.schemas.template import TemplateDraft
from app.services.store import InMemoryStore

router = APIRouter()


@router.get("/", response_model=list[TaskTemplate])
async def list_templates(
    include_archived: bool = False,
    store: InMemoryStore = Depends(get_store),
):
    templates = store.list_templates()
    if not include_archived:
        templates = [t for t in templates if not t.archived]
    return templates


@router.post("/", response_model=TaskTemplate, status_code=201)
async def create_template(
    body: TemplateDraft,
    store: InMemoryStore = Depends(get_store),
):
    return store.create_template(body)


@router.get("/{template_id}", response_model=TaskTemplate)
async def get_template(
    template_id: str,
    store: InMemoryStore = Depends(get_store),
):
    return store.get_template(template_id)


@router.post("/{template_id}/versions", response_model=TaskTemplate, status_code=201)
async def publish_template_version(
    template_id: str,
    body: TemplateDraft | None = Body(None),
    store: InMemoryStore = Depends(get_store),
):
    """Publish a new version; without a body the current one is republished."""
    return store.publish_template_version(template_id, body)

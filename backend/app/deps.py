"""FastAPI dependencies."""

from fastapi import Request

from app.services.store import InMemoryStore


def get_store(request: Request) -> InMemoryStore:
    """Return the process-wide store created in the app lifespan.

    Tests override this dependency with a fresh store per test.
    """
    return request.app.state.store

"""
Employee Directory Backend: Seed Route
=======================================

GET /seed_db drops every table, recreates the schema and loads the demo
directory. Destructive; intended for local development and demos.
"""

from fastapi import APIRouter, Depends

from app.schemas.employee import ErrorResponse, MessageResponse
from app.services.seed_service import seed_database
from app.services.store import EntityStore, get_store

router = APIRouter(tags=["Seed"])


@router.get(
    "/seed_db",
    response_model=MessageResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Reset the database and load demo data",
)
async def seed_db(store: EntityStore = Depends(get_store)) -> MessageResponse:
    return await seed_database(store)

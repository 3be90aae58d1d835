"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from access_insights.api.routers.enrichment import router as enrichment_router
from access_insights.api.routers.query import router as query_router
from access_insights.api.routers.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router, tags=["system"])
api_router.include_router(query_router, tags=["query"])
api_router.include_router(enrichment_router, tags=["enrichment"])

"""API router aggregation."""

from fastapi import APIRouter

from jwt_revoker.api import health, revocation

api_router = APIRouter()

api_router.include_router(revocation.router, tags=["Revocation"])
api_router.include_router(health.router, tags=["Health"])

"""
API routes package.
"""
from fastapi import APIRouter
from routes.hash import router as hash_router
from routes.stats import router as stats_router
from routes.shutdown import router as shutdown_router

# Aggregate all routers
api_router = APIRouter()
api_router.include_router(hash_router, tags=["hash"])
api_router.include_router(stats_router, tags=["stats"])
api_router.include_router(shutdown_router, tags=["admin"])

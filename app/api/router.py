from fastapi import APIRouter

from app.api.routes import meta, usage

api_router = APIRouter()
api_router.include_router(meta.router)
api_router.include_router(usage.router, tags=["usage"])

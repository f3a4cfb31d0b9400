from fastapi import APIRouter

from wanrun.api.routers import bookmarks, checkins

api_router = APIRouter()

api_router.include_router(bookmarks.router)
api_router.include_router(checkins.router)

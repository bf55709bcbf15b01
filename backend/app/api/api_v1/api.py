from app.api.api_v1.endpoints import (
    auth,
    confederations,
    join_requests,
    members,
    news,
    rankings,
    scoring,
    seasons,
    settings,
    top100,
    users,
)
from fastapi import APIRouter

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(
    confederations.router, prefix="/confederations", tags=["confederations"]
)
api_router.include_router(members.router, prefix="/members", tags=["members"])
api_router.include_router(rankings.router, prefix="/rankings", tags=["rankings"])
api_router.include_router(scoring.router, prefix="/scoring", tags=["scoring"])
api_router.include_router(top100.router, prefix="/top100", tags=["top100"])
api_router.include_router(seasons.router, prefix="/seasons", tags=["seasons"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(news.router, prefix="/news", tags=["news"])
api_router.include_router(
    join_requests.router, prefix="/join-requests", tags=["join-requests"]
)

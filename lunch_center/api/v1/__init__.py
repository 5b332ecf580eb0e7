from fastapi import APIRouter

from lunch_center.api.v1 import recommend, recommendations, search


api_router = APIRouter()

api_router.include_router(search.router, prefix="/api", tags=["search"])
api_router.include_router(recommend.router, prefix="/api", tags=["recommend"])
api_router.include_router(recommendations.router, prefix="/api", tags=["recommendations"])

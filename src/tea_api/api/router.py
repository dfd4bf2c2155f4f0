from fastapi import APIRouter

from tea_api.api import teas

api_router = APIRouter()
api_router.include_router(teas.router)

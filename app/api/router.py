from fastapi import APIRouter

from app.api.v1 import messages, users

api_router = APIRouter(prefix="/api")

api_router.include_router(messages.router)
api_router.include_router(users.router)

from fastapi import APIRouter

from src.notekeep.api.v1 import admin, auth, notes, tenants

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(notes.router)
api_router.include_router(admin.router)
api_router.include_router(tenants.router)

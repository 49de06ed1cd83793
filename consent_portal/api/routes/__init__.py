from fastapi import APIRouter

from consent_portal.api.routes.account_routes import router as account_router
from consent_portal.api.routes.approval_routes import router as approval_router

api_router = APIRouter()

api_router.include_router(approval_router)
api_router.include_router(account_router)

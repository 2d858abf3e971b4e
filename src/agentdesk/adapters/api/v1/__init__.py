from fastapi import APIRouter

from agentdesk.adapters.api.v1.health import router as health_router
from agentdesk.adapters.api.v1.routes.auth import router as auth_router
from agentdesk.adapters.api.v1.routes.logistics import router as logistics_router
from agentdesk.adapters.api.v1.routes.offices import router as offices_router
from agentdesk.adapters.api.v1.routes.orders import router as orders_router
from agentdesk.adapters.api.v1.routes.profile import router as profile_router
from agentdesk.adapters.api.v1.routes.wallet import router as wallet_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(profile_router, tags=["profile"])
api_router.include_router(orders_router, prefix="/orders", tags=["orders"])
api_router.include_router(wallet_router, prefix="/wallet", tags=["wallet"])
api_router.include_router(offices_router, prefix="/agent-offices", tags=["offices"])
api_router.include_router(logistics_router, tags=["logistics"])

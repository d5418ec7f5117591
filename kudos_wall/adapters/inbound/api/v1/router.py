# kudos_wall/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from kudos_wall.adapters.inbound.api.v1.endpoints import (
    analytics_endpoint,
    auth_endpoint,
    category_endpoint,
    health_endpoint,
    kudo_card_endpoint,
    team_endpoint,
    user_endpoint,
)

api_router = APIRouter()

api_router.include_router(health_endpoint.router, prefix="/health", tags=["Health"])
api_router.include_router(auth_endpoint.router, prefix="/auth", tags=["Auth"])
api_router.include_router(user_endpoint.router, prefix="/users", tags=["Users"])
api_router.include_router(team_endpoint.router, prefix="/teams", tags=["Teams"])
api_router.include_router(category_endpoint.router, prefix="/categories", tags=["Categories"])
api_router.include_router(kudo_card_endpoint.router, prefix="/kudo-cards", tags=["Kudo Cards"])
api_router.include_router(analytics_endpoint.router, prefix="/analytics", tags=["Analytics"])

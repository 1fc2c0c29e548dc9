"""API v1 router configuration."""

from fastapi import APIRouter

from mazaochain.api.v1.endpoints import collateral, loans, prices, valuations

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    valuations.router,
    prefix="/valuations",
    tags=["valuations"],
)

api_router.include_router(
    collateral.router,
    prefix="/collateral",
    tags=["collateral"],
)

api_router.include_router(
    prices.router,
    prefix="/prices",
    tags=["prices"],
)

api_router.include_router(
    loans.router,
    prefix="/loans",
    tags=["loans"],
)

from fastapi import APIRouter

from order_intake.api.v1 import health, orders

api_router = APIRouter()

api_router.include_router(health.router, prefix="/v1", tags=["health"])
api_router.include_router(orders.router, prefix="/v1/orders", tags=["orders"])

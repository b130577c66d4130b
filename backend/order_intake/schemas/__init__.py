from order_intake.schemas.health import HealthResponse
from order_intake.schemas.order import (
    CargoRecord,
    CompanyRecord,
    Customer,
    CustomerSide,
    LocationRecord,
    OrderRecord,
    OrderSubmission,
    TimeWindow,
)

__all__ = [
    "CargoRecord",
    "CompanyRecord",
    "Customer",
    "CustomerSide",
    "HealthResponse",
    "LocationRecord",
    "OrderRecord",
    "OrderSubmission",
    "TimeWindow",
]

import enum
from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class CustomerSide(str, enum.Enum):
    """Which party of the shipment the ordering customer is."""

    SENDER = "sender"
    RECEIVER = "receiver"


# --- Shared Sub-Models ---


class CompanyRecord(BaseModel):
    """Company/address block. Absent values are empty strings, never null."""

    company: str = Field("", description="Company or person name")
    company_code: str = Field("", description="Registry or customer code")
    vat_code: str = Field("", description="VAT number")
    email: str = Field("", description="Email address")
    contact_person: str = Field("", description="Contact person name")
    street_address: str = Field("", description="Street and house number")
    title: str = Field("", description="Address title or label")
    city: str = Field("NA", min_length=2, description="City, 'NA' when unknown")
    country: str = Field("", max_length=2, description="ISO-3166 alpha-2 code or empty")
    postal_code: str = Field("", description="ZIP/postal code")
    comment: str = Field("", description="Free-text remark")


class Customer(BaseModel):
    side: CustomerSide = CustomerSide.SENDER
    details: CompanyRecord = Field(default_factory=CompanyRecord)


class TimeWindow(BaseModel):
    datetime_from: str = Field(..., description="Window start, ISO-8601")
    datetime_to: str = Field(..., description="Window end, ISO-8601, not before datetime_from")

    @model_validator(mode="after")
    def _check_order(self) -> "TimeWindow":
        if datetime.fromisoformat(self.datetime_to) < datetime.fromisoformat(self.datetime_from):
            raise ValueError("datetime_to must not be before datetime_from")
        return self


class LocationRecord(BaseModel):
    """Loading or destination stop."""

    company_address: CompanyRecord
    time: TimeWindow


class CargoRecord(BaseModel):
    """One cargo line of a transport order."""

    title: str = Field(..., description="Goods description")
    package_count: int = Field(1, ge=0, description="Number of packages")
    package_type: str = Field("EPAL", description="Package type code")
    number: str = Field("", description="Free-text cargo/item number")
    type: str = Field("full", description="Load type")
    value: float = Field(0.0, description="Goods value")
    currency: str = Field("EUR", description="Currency of value")
    pkg_width: float = 0.0
    pkg_length: float = 0.0
    pkg_height: float = 0.0
    ldm: float = Field(0.0, description="Loading meters")
    volume: float = 0.0
    weight: float = Field(0.0, description="Gross weight")
    chargeable_weight: float = 0.0
    temperature_min: float = 0.0
    temperature_max: float = 0.0
    temperature_mode: str = ""
    adr: bool = Field(False, description="Dangerous goods")
    extra_lift: bool = False
    palletized: bool = True
    manual_load: bool = False
    vehicle_make: str = ""
    vehicle_model: str = ""


# --- Order ---


class OrderRecord(BaseModel):
    """Structured transport order assembled from document lines."""

    attachment_filenames: list[str] = Field(default_factory=list)
    customer: Customer
    loading_locations: list[LocationRecord] = Field(default_factory=list)
    destination_locations: list[LocationRecord] = Field(default_factory=list)
    cargos: list[CargoRecord] = Field(..., min_length=1)
    order_reference: str = Field(..., min_length=1)
    freight_price: float = 0.0
    freight_currency: str = "EUR"
    transport_numbers: str = ""
    comment: str = ""
    incoterms: str = "CFR"


class OrderSubmission(BaseModel):
    """Output of the submission sink for one accepted order."""

    order_reference: str
    order: OrderRecord
    submitted_at: datetime


# --- API Request/Response ---


class OrderLinesRequest(BaseModel):
    lines: list[str] = Field(..., description="Document text, one entry per line")


class OrderExtractionRequest(OrderLinesRequest):
    attachment_filename: str | None = Field(None, description="Source attachment name")
    force: bool = Field(False, description="Skip the classification gate")


class OrderClassificationResponse(BaseModel):
    handled: bool
    matched_keywords: list[str] = Field(default_factory=list)

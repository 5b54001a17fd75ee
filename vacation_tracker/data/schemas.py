"""
Data models for the vacation tracker using Pydantic.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RequestStatus(str, Enum):
    """Approval status of a vacation request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class View(str, Enum):
    """Screens the presentation layer can show."""

    DASHBOARD = "dashboard"
    CONFIG = "config"


class RangeStatus(str, Enum):
    """Classification of an entered date range."""

    EMPTY = "empty"  # one or both dates not entered yet
    OK = "ok"
    INVALID_RANGE = "invalid_range"
    NO_BUSINESS_DAYS = "no_business_days"


class ErrorKind(str, Enum):
    """Kinds of error surfaced through the message slot."""

    INVALID_RANGE = "invalid_range"
    NO_BUSINESS_DAYS = "no_business_days"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    INVALID_HOLIDAY = "invalid_holiday"
    NOT_CANCELLABLE = "not_cancellable"
    NOT_AUTHENTICATED = "not_authenticated"
    PERSISTENCE = "persistence"


class VacationRequest(BaseModel):
    """A submitted vacation request. Only the status changes after creation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Identifier assigned by the store")
    start_date: date = Field(..., alias="startDate", description="First day of the range")
    end_date: date = Field(..., alias="endDate", description="Last day of the range (inclusive)")
    days: int = Field(..., ge=0, description="Business days at submission time")
    status: RequestStatus = Field(default=RequestStatus.PENDING, description="Approval status")
    requested_on: date = Field(..., alias="requestedOn", description="Submission date")

    @property
    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the store's document shape (id excluded)."""
        return {
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "days": self.days,
            "status": self.status.value,
            "requestedOn": self.requested_on.isoformat(),
        }

    @classmethod
    def from_document(cls, doc_id: str, data: Dict[str, Any]) -> "VacationRequest":
        # The store id wins over an `id` field inside the document
        return cls.model_validate({**data, "id": doc_id})


class Holiday(BaseModel):
    """A configured holiday, keyed by its date."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Display name")
    holiday_date: date = Field(..., alias="date", description="Date of the holiday")

    @property
    def key(self) -> str:
        return self.holiday_date.isoformat()

    def to_document(self) -> Dict[str, Any]:
        return {"name": self.name, "date": self.key}

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "Holiday":
        return cls(**data)


class Settings(BaseModel):
    """Per-user settings document."""

    model_config = ConfigDict(populate_by_name=True)

    available_days: int = Field(..., ge=0, alias="availableDays", description="Annual allotment")

    def to_document(self) -> Dict[str, Any]:
        return {"availableDays": self.available_days}


class RangeEvaluation(BaseModel):
    """Business-day count of an entered range plus its classification."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    business_days: int = Field(default=0, ge=0)
    status: RangeStatus = RangeStatus.EMPTY


class BalanceSummary(BaseModel):
    """Day totals derived from the allotment and the request list."""

    available_days: int
    approved_days: int = Field(..., ge=0)
    pending_days: int = Field(..., ge=0)
    remaining_days: int


class Config(BaseModel):
    """Configuration for the vacation tracker."""

    app_id: str = Field(default="default-app-id", description="Namespace for all user data")
    store_backend: str = Field(default="json", pattern="^(json|memory)$", description="json or memory")
    store_path: str = Field(default="data/vacation_tracker.json", description="JSON store file")
    identity_path: str = Field(default="data/identity", description="File holding the anonymous user id")
    auth_token: Optional[str] = Field(default=None, description="Custom sign-in token")
    default_available_days: int = Field(default=22, ge=0, description="Allotment when none is saved")
    holiday_country: str = Field(default="ES", description="Country for public holiday import")
    holiday_subdivision: Optional[str] = Field(default=None, description="Region for public holiday import")
    language: str = Field(default="en", description="Interface language: en or es")
    output_format: str = Field(default="json", description="Default export format: json or csv")
    output_directory: str = Field(default="results", description="Directory for export files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")

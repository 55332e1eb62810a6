"""Pydantic models for API request/response.

JSON uses camelCase keys (``projectName``, ``reportType``...) to match the
documents the web client already works with; Python attributes stay snake_case.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from domain.model.dashboard import ALL_REPORT_TYPES, DashboardFilters
from domain.model.inspection import Inspection, InspectionDetails, Observation, ReportType
from domain.model.user import User


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


# ── Users / auth ─────────────────────────────────────────


class UserResponse(CamelModel):
    """User as exposed to clients (never includes the password hash)."""
    id: str = Field(..., description="User ID")
    email: str
    name: str
    role: str = "user"
    created_at: datetime
    updated_at: datetime
    last_login: Optional[datetime] = None

    @staticmethod
    def of(user: User) -> 'UserResponse':
        return UserResponse(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login=user.last_login,
        )


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    name: str = Field(..., min_length=1, max_length=200)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    user: UserResponse


class ForgotPasswordRequest(BaseModel):
    # Plain str: syntax is checked by the reset service so it can answer 400 {error}
    email: str = Field(..., max_length=320)


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, max_length=256)
    password: str


# ── Inspections ──────────────────────────────────────────


class ObservationModel(CamelModel):
    area: str = Field(..., min_length=1)
    description: str = ""
    photos: list[str] = Field(default_factory=list)


class InspectionCreate(CamelModel):
    """Request model for creating an inspection."""
    project_name: str = Field(..., min_length=1, max_length=300)
    date: datetime
    report_type: ReportType = ReportType.PROGRESS
    address: Optional[str] = None
    city_county: Optional[str] = None
    inspector_name: Optional[str] = None
    weather: Optional[str] = None
    notes: Optional[str] = None
    observations: list[ObservationModel] = Field(default_factory=list)

    def to_details(self) -> InspectionDetails:
        return InspectionDetails(
            project_name=self.project_name,
            date=self.date,
            report_type=self.report_type,
            address=self.address,
            city_county=self.city_county,
            inspector_name=self.inspector_name,
            weather=self.weather,
            notes=self.notes,
            observations=[Observation(**o.model_dump()) for o in self.observations],
        )


class InspectionUpdate(CamelModel):
    """Partial update. Only fields present in the request body are applied.

    Unknown keys (including ``userId``) are ignored, so ownership cannot be changed.
    """
    project_name: Optional[str] = Field(None, min_length=1, max_length=300)
    date: Optional[datetime] = None
    report_type: Optional[ReportType] = None
    address: Optional[str] = None
    city_county: Optional[str] = None
    inspector_name: Optional[str] = None
    weather: Optional[str] = None
    notes: Optional[str] = None
    observations: Optional[list[ObservationModel]] = None

    @field_validator('project_name', 'date', 'report_type', 'observations')
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    def to_changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class InspectionResponse(CamelModel):
    id: str
    user_id: str
    project_name: str
    date: datetime
    report_type: ReportType
    address: Optional[str] = None
    city_county: Optional[str] = None
    inspector_name: Optional[str] = None
    weather: Optional[str] = None
    notes: Optional[str] = None
    observations: list[ObservationModel] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def of(inspection: Inspection) -> 'InspectionResponse':
        d = inspection.details
        return InspectionResponse(
            id=inspection.id,
            user_id=inspection.user_id,
            project_name=d.project_name,
            date=d.date,
            report_type=d.report_type,
            address=d.address,
            city_county=d.city_county,
            inspector_name=d.inspector_name,
            weather=d.weather,
            notes=d.notes,
            observations=[
                ObservationModel(area=o.area, description=o.description, photos=list(o.photos))
                for o in d.observations
            ],
            created_at=inspection.created_at,
            updated_at=inspection.updated_at,
        )


# ── Dashboard ────────────────────────────────────────────


class FiltersModel(CamelModel):
    date_range: str
    report_type: str
    sort_by: str

    @staticmethod
    def of(filters: DashboardFilters) -> 'FiltersModel':
        return FiltersModel(
            date_range=filters.date_range.value,
            report_type=filters.report_type.value if filters.report_type else ALL_REPORT_TYPES,
            sort_by=filters.sort_by.value,
        )


class InspectionSummaryResponse(CamelModel):
    id: str
    date: str = Field(..., description="Inspection date, YYYY-MM-DD")
    project_name: str
    address: str
    report_type: ReportType


class DashboardResponse(CamelModel):
    filters: FiltersModel
    inspections: list[InspectionSummaryResponse]
    user_id: str
    is_foreign: bool = False
    pending_delete: Optional[str] = None


class PendingDeleteRequest(CamelModel):
    inspection_id: str = Field(..., min_length=1)

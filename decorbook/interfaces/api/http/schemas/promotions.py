"""
Schemas HTTP de solicitudes de promoción a decorador.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .....application.usecases.promotion import PromotionRequestInput
from .....domain.entities import PromotionRequest


class PromotionRequestReq(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None

    def to_input(self) -> PromotionRequestInput:
        return PromotionRequestInput(
            name=self.name,
            email=self.email,
            division=self.division,
            district=self.district,
            phone=self.phone,
            role=self.role,
        )


class PromotionRequestRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="_id")
    name: str
    email: str
    division: str
    district: str
    phone: str
    role: str
    status: str
    requested_at: Optional[datetime] = Field(default=None, alias="requestedAt")
    approved_at: Optional[datetime] = Field(default=None, alias="approvedAt")
    rejected_at: Optional[datetime] = Field(default=None, alias="rejectedAt")

    @classmethod
    def from_entity(cls, request: PromotionRequest) -> "PromotionRequestRes":
        return cls(
            id=request.id,
            name=request.name,
            email=request.email,
            division=request.division,
            district=request.district,
            phone=request.phone,
            role=request.role,
            status=request.status,
            requested_at=request.requested_at,
            approved_at=request.approved_at,
            rejected_at=request.rejected_at,
        )

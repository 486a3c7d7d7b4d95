"""
Schemas HTTP de publicaciones de servicios (decorations).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .....domain.entities import Decoration


class CreateDecorationReq(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    category: str = ""
    description: str = ""
    price: float = Field(default=0, description="Major currency units")
    image: Optional[str] = None

    def to_entity(self) -> Decoration:
        return Decoration(
            name=self.name.strip(),
            category=self.category.strip(),
            description=self.description.strip(),
            price=self.price,
            image=self.image,
        )


class UpdateDecorationReq(BaseModel):
    """Update parcial; solo se aplican los campos enviados."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class DecorationRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="_id")
    name: str
    category: str
    description: str
    price: float
    image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, decoration: Decoration) -> "DecorationRes":
        return cls(
            id=decoration.id,
            name=decoration.name,
            category=decoration.category,
            description=decoration.description,
            price=decoration.price,
            image=decoration.image,
            created_at=decoration.created_at,
            updated_at=decoration.updated_at,
        )


class DeleteDecorationRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(alias="deletedCount")

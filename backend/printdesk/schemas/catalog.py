"""
Colour and Filament Pydantic Schemas
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from printdesk.schemas.common import parse_wire_date


# ============================================================================
# Colour Schemas
# ============================================================================

class ColourCreate(BaseModel):
    """Add a colour to the catalog"""
    colour_name: str = Field(..., min_length=1, max_length=100)


class ColourUpdate(ColourCreate):
    """Rename a colour"""
    pass


class ColourRead(BaseModel):
    """Catalog colour"""
    id: int
    colour_name: str

    class Config:
        from_attributes = True


# ============================================================================
# Filament Schemas
# ============================================================================

class FilamentBase(BaseModel):
    """Spool fields shared by every payload"""
    size: float = 0
    amount_used: float = 0
    date_of_addition: Optional[date] = None
    material: Optional[str] = None
    colour_name: Optional[str] = None

    @field_validator("date_of_addition", mode="before")
    @classmethod
    def normalise_date(cls, v):
        return parse_wire_date(v)


class FilamentCreate(FilamentBase):
    """Register a new spool"""
    size: float = Field(..., gt=0, description="Total weight on the spool")
    amount_used: float = Field(0, ge=0)
    date_of_addition: date = Field(default_factory=date.today)


class FilamentUpdate(FilamentBase):
    """Full spool as sent on PUT; a body id is ignored in favour of the path"""
    id: Optional[int] = None
    size: float = Field(..., ge=0)
    amount_used: float = Field(0, ge=0)


class FilamentRead(FilamentBase):
    """Spool as stored"""
    id: int

    @property
    def remaining(self) -> float:
        return self.size - self.amount_used

    class Config:
        from_attributes = True

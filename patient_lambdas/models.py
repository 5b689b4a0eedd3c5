"""Request and record shapes for the patient handlers."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_PAGE_SIZE = 5


class PatientInput(BaseModel):
    """Body accepted by create and update."""

    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: str = Field(min_length=1)
    birth_date: str = Field(
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="ISO date, YYYY-MM-DD",
        examples=["1990-01-01"],
    )

    @field_validator("birth_date")
    @classmethod
    def check_birth_date(cls, v: str) -> str:
        date.fromisoformat(v)
        return v


class ListQuery(BaseModel):
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    next: Optional[str] = None

    @field_validator("next")
    @classmethod
    def blank_cursor_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class Patient(PatientInput):
    """A stored patient record."""

    patient_id: str
    active: bool = True
    created_at: int
    updated_at: int

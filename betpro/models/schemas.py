"""Pydantic schemas for the bet ledger."""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BetStatus(str, Enum):
    """Lifecycle state of a bet."""
    PENDING = "PENDING"
    WIN = "WIN"
    LOSS = "LOSS"
    VOID = "VOID"

    @property
    def is_resolved(self) -> bool:
        return self is not BetStatus.PENDING


class FilterMode(str, Enum):
    """Reporting window."""
    ANNUAL = "annual"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class Language(str, Enum):
    """Display languages."""
    EN = "en"
    PT = "pt"
    ES = "es"
    FR = "fr"
    IT = "it"
    DE = "de"
    AR = "ar"


class Currency(str, Enum):
    """Display currencies."""
    USD = "USD"
    BRL = "BRL"
    EUR = "EUR"


class Theme(str, Enum):
    """Display theme."""
    LIGHT = "light"
    DARK = "dark"


class SubGame(BaseModel):
    """One leg of a combination bet."""
    event: str
    odd: float = Field(gt=0)


class Bet(BaseModel):
    """A single wager as held by the store."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: date
    match: str
    type: str
    odds: float
    stake: float
    status: BetStatus = BetStatus.PENDING
    profit: float = 0.0
    sub_games: Optional[list[SubGame]] = Field(default=None, alias="subGames")

    @property
    def is_combination(self) -> bool:
        return bool(self.sub_games) and len(self.sub_games) >= 2

    def to_record(self) -> dict:
        """Serialize to the persisted JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BetDraft(BaseModel):
    """Validated bet form submission, used for create and full edit."""
    date: date
    type: str = ""
    stake: float = Field(gt=0)
    legs: list[SubGame] = Field(min_length=1)

    @field_validator("type")
    @classmethod
    def _strip_type(cls, value: str) -> str:
        return value.strip()

    @field_validator("legs")
    @classmethod
    def _legs_have_events(cls, legs: list[SubGame]) -> list[SubGame]:
        for leg in legs:
            if not leg.event.strip():
                raise ValueError("every leg needs an event description")
        return legs

    @model_validator(mode="after")
    def _type_required_for_singles(self) -> "BetDraft":
        # Combinations fall back to the localized "Multiple" label
        if not self.type and len(self.legs) < 2:
            raise ValueError("bet type is required")
        return self

    @property
    def is_combination(self) -> bool:
        return len(self.legs) >= 2


class FilterConfig(BaseModel):
    """Active reporting window."""
    mode: FilterMode = FilterMode.ANNUAL
    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)  # calendar month, January = 1
    start_date: date
    end_date: date

    @classmethod
    def default(cls, today: Optional[date] = None) -> "FilterConfig":
        """Annual view of the current year, custom range = month to date."""
        today = today or date.today()
        return cls(
            mode=FilterMode.ANNUAL,
            year=today.year,
            month=today.month,
            start_date=today.replace(day=1),
            end_date=today,
        )

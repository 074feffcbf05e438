"""Pydantic request models for the HTTP API."""

from pydantic import BaseModel, Field

from mentor_payouts.services.csv_import import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_RATE_PER_HOUR,
    DEFAULT_SESSION_TYPE,
)


class SignInRequest(BaseModel):
    """Credentials submitted from the sign-in screen."""

    email: str
    password: str


class SessionCreateRequest(BaseModel):
    """Session form payload."""

    mentor_id: str = Field(min_length=1)
    date: str = Field(min_length=1)
    type: str = Field(default=DEFAULT_SESSION_TYPE, min_length=1)
    duration: int = Field(default=DEFAULT_DURATION_MINUTES, ge=1)
    rate_per_hour: int = Field(default=DEFAULT_RATE_PER_HOUR, ge=1)


class ReceiptCreateRequest(BaseModel):
    """Receipt request for the selected mentor."""

    mentor_id: str | None = None


class PayoutSessionInput(BaseModel):
    """Minimal session data needed to price a session."""

    id: str = ""
    mentor_id: str = ""
    mentor_name: str = ""
    date: str = ""
    type: str = DEFAULT_SESSION_TYPE
    duration: int
    rate_per_hour: int


class AdditionalChargeInput(BaseModel):
    """Flat deduction applied after tax."""

    name: str
    amount: float


class PayoutRequest(BaseModel):
    """Ad-hoc payout calculation.

    Omitted percentages use the configured defaults; an explicit ``null``
    disables that step.
    """

    sessions: list[PayoutSessionInput] = Field(default_factory=list)
    platform_fee_percentage: float | None = None
    gst_percentage: float | None = None
    additional_charges: list[AdditionalChargeInput] = Field(default_factory=list)

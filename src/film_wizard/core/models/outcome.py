"""Suggestion outcome and session state models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .movie import Credits, MovieDetails


class OutcomeStatus(str, Enum):
    """Suggestion request status enumeration."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class RequestOutcome(BaseModel):
    """Result of one suggestion request.

    Use the factory classmethods; the validator rejects combinations that do
    not match the status.
    """

    status: OutcomeStatus = Field(..., description="Outcome status")
    movie: Optional[MovieDetails] = Field(None, description="Suggested movie")
    credits: Optional[Credits] = Field(None, description="Credits of the suggested movie")
    error: Optional[str] = Field(None, description="Failure message")
    degraded: bool = Field(default=False, description="Success that used fallback data")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_shape(self) -> "RequestOutcome":
        """Ensure payload fields match the status."""
        if self.status == OutcomeStatus.SUCCESS:
            if self.movie is None or self.credits is None or self.error is not None:
                raise ValueError("success outcome needs movie and credits and no error")
        elif self.status == OutcomeStatus.FAILURE:
            if self.error is None or self.movie is not None or self.credits is not None:
                raise ValueError("failure outcome needs an error and no movie")
        elif self.movie is not None or self.credits is not None or self.error is not None:
            raise ValueError(f"{self.status.value} outcome carries no payload")
        if self.degraded and self.status != OutcomeStatus.SUCCESS:
            raise ValueError("only a success outcome can be degraded")
        return self

    @classmethod
    def idle(cls) -> "RequestOutcome":
        return cls(status=OutcomeStatus.IDLE)

    @classmethod
    def loading(cls) -> "RequestOutcome":
        return cls(status=OutcomeStatus.LOADING)

    @classmethod
    def success(
        cls, movie: MovieDetails, credits: Credits, degraded: bool = False
    ) -> "RequestOutcome":
        return cls(status=OutcomeStatus.SUCCESS, movie=movie, credits=credits, degraded=degraded)

    @classmethod
    def failure(cls, message: str) -> "RequestOutcome":
        return cls(status=OutcomeStatus.FAILURE, error=message)

    @property
    def is_success(self) -> bool:
        """Check if the request produced a movie."""
        return self.status == OutcomeStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if the request failed."""
        return self.status == OutcomeStatus.FAILURE


class SessionState(BaseModel):
    """Observable state of a suggestion session."""

    movie: Optional[MovieDetails] = Field(None, description="Displayed movie")
    credits: Credits = Field(default_factory=Credits, description="Displayed credits")
    error: Optional[str] = Field(None, description="Displayed error message")
    loading: bool = Field(default=False, description="Request in flight")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_exclusive(self) -> "SessionState":
        """A movie and an error are never shown together."""
        if self.movie is not None and self.error is not None:
            raise ValueError("movie and error are mutually exclusive")
        return self

    @property
    def outcome(self) -> RequestOutcome:
        """View the state as a single tagged outcome."""
        if self.loading:
            return RequestOutcome.loading()
        if self.error is not None:
            return RequestOutcome.failure(self.error)
        if self.movie is not None:
            return RequestOutcome.success(self.movie, self.credits)
        return RequestOutcome.idle()

"""Pydantic schemas guarding the settings and request boundaries."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from models.suggestions import DEFAULT_TEMPERATURE_THRESHOLD, Location, UserPreferences

MIN_THRESHOLD_C = 0
MAX_THRESHOLD_C = 30


class LocationInput(BaseModel):
    """Coordinates plus optional display names."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    city: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None

    def to_domain(self) -> Location:
        return Location(**self.model_dump())


class UserPreferencesInput(BaseModel):
    """User-editable settings consumed by the suggestion core."""

    temperature_threshold: float = Field(
        DEFAULT_TEMPERATURE_THRESHOLD, ge=MIN_THRESHOLD_C, le=MAX_THRESHOLD_C
    )
    ai_suggestions_enabled: bool = True
    news_enabled: bool = True

    def to_domain(self) -> UserPreferences:
        return UserPreferences(**self.model_dump())


class PreferencesUpdate(BaseModel):
    """Partial settings update; omitted fields keep their stored value."""

    temperature_threshold: Optional[float] = Field(None, ge=MIN_THRESHOLD_C, le=MAX_THRESHOLD_C)
    ai_suggestions_enabled: Optional[bool] = None
    news_enabled: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class MorningSuggestionsRequest(BaseModel):
    """Request envelope for a morning suggestions refresh."""

    location: LocationInput
    user_id: Optional[str] = Field(None, min_length=1)
    preferences: Optional[UserPreferencesInput] = None
    use_ai: bool = True

    @model_validator(mode="after")
    def _preferences_or_user(self) -> "MorningSuggestionsRequest":
        if self.preferences is not None and self.user_id is not None:
            raise ValueError("Provide either inline preferences or a user_id, not both")
        return self


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    return ValidationResult(message=message, details=exc.errors(include_url=False)).model_dump()


__all__ = [
    "LocationInput",
    "MorningSuggestionsRequest",
    "PreferencesUpdate",
    "UserPreferencesInput",
    "ValidationResult",
    "validation_failure",
]

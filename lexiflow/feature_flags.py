"""Feature toggles derived from settings and exposed to clients."""

from pydantic import BaseModel, Field

from lexiflow.config import Settings, get_settings


class FeatureFlags(BaseModel):
    user_registrations: bool = Field(..., description="New accounts can be created")

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeatureFlags":
        return cls(user_registrations=settings.ALLOW_USER_REGISTRATIONS)


def get_feature_flags() -> FeatureFlags:
    return FeatureFlags.from_settings(get_settings())


def is_user_registrations_enabled() -> bool:
    return get_feature_flags().user_registrations

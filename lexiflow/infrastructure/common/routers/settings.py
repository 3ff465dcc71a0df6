from fastapi import APIRouter

from lexiflow.config import get_settings
from lexiflow.feature_flags import get_feature_flags
from lexiflow.infrastructure.common.schemas.settings_schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    This is a public endpoint that doesn't require authentication.
    """
    settings = get_settings()
    return AppSettingsResponse(
        feature_flags=get_feature_flags(),
        default_session_words=settings.DEFAULT_SESSION_WORDS,
        srs_review_batch_size=settings.SRS_REVIEW_BATCH_SIZE,
    )

"""Service settings for marketing-ai-readiness.

All values can be overridden with environment variables using the
READINESS_ prefix (e.g. READINESS_LOG_LEVEL=DEBUG).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from marketing_ai_readiness.core.policy import (
    DEFAULT_MAX_RECOMMENDATIONS,
    WEIGHT_SUM_TOLERANCE,
)


class Settings(BaseSettings):
    """Settings for the readiness scoring service.

    Environment variable prefix: READINESS_
    """

    service_name: str = "marketing-ai-readiness"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Configuration tables. Empty path means the built-in catalog modules.
    config_path: str = ""
    weight_sum_tolerance: float = WEIGHT_SUM_TOLERANCE

    # Recommendation output
    recommendation_max_results: int = DEFAULT_MAX_RECOMMENDATIONS

    model_config = SettingsConfigDict(env_prefix="READINESS_")

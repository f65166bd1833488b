import typing
import pydantic_settings


class ReviewerConfig(pydantic_settings.BaseSettings):
    REVIEWER_LOCALE: typing.Literal["en", "zh"] = "en"
    LARGE_CHANGE_THRESHOLD: int = 300
    COMMENTED_CODE_MIN_LENGTH: int = 50
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = "./.env"
        extra = "ignore"


CONFIG = ReviewerConfig()

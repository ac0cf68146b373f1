# The module is to define the configuration settings for the tool service.
# Date: 2026-10-16
# Version: 0.1.0

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    """
    The Settings class is used to define the configuration settings for the tool service.
    It inherits from BaseSettings, which allows it to load environment variables
    and provides type validation for the settings.
    Attributes:
        LOG_LEVEL (str): The level for the 'toolhub' logger.
        EMAIL_USER (str): Account used by the email sender tool to log in and send.
        EMAIL_PASSWORD (str): Password or app token for EMAIL_USER.
        SMTP_HOST (str): SMTP server for outgoing mail.
        SMTP_PORT (int): SSL port of the SMTP server.
        WEATHER_API_BASE_URL (str): Base URL of the wttr.in compatible weather service.
        HTTP_TIMEOUT_SECONDS (float): Timeout applied by tools that call HTTP services.
    """
    LOG_LEVEL: str = "INFO"

    # EMAIL_SENDER
    EMAIL_USER: Optional[str] = None
    EMAIL_PASSWORD: Optional[str] = None
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 465

    # WEATHER
    WEATHER_API_BASE_URL: str = "https://wttr.in"

    # Tools own their timeouts; the dispatcher never cancels a call.
    HTTP_TIMEOUT_SECONDS: float = 10.0


    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore"

# lru_cache to cache the settings instance.
@lru_cache
def get_settings():
    return Settings()


if __name__ == "__main__":
    settings = get_settings()
    print(settings.model_dump_json(indent=4, exclude={"EMAIL_PASSWORD"}))

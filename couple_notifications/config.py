from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the notification functions"""

    # Application settings
    service_name: str = "couple-notifications"
    log_level: str = "INFO"
    environment: str = "dev"

    # Cloud Functions settings
    function_region: str = "me-west1"

    # Firebase settings
    firebase_secret: Optional[str] = None  # service account JSON, ADC is used when unset
    users_collection: str = "users"

    # FCM batching settings
    fcm_batch_size: int = 500  # FCM allows up to 500 tokens per multicast request

    # Notification content settings
    message_preview_length: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


settings = Settings()

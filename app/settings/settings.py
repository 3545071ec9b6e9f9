from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    DATABASE_URL: str
    DATABASE_ECHO: bool = False


class BookingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BOOKING_")
    TIMEZONE: str = "Asia/Kolkata"
    MIN_BOOKING_LEAD_MINUTES: int = 30
    MIN_CANCEL_LEAD_HOURS: int = 24
    MAX_INTERVAL_MINUTES: int = 120


class AdminSeedSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ADMIN_")
    NAME: str = "Admin"
    EMAIL: str = "admin@example.com"


booking_settings = BookingSettings()

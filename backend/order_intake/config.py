from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    environment: str = "development"
    log_level: str = "INFO"

    # Record defaults
    default_currency: str = "EUR"
    default_incoterms: str = "CFR"
    default_country: str = "DE"
    default_city: str = "NA"
    default_package_type: str = "EPAL"

    # Time windows
    loading_window_hours: int = 2
    delivery_window_hours: int = 4
    delivery_default_offset_days: int = 1
    timezone: str = "UTC"
    date_dayfirst: bool = True

    # Synthetic order references
    order_reference_prefix: str = "ORD-"
    order_reference_length: int = 6


settings = Settings()

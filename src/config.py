from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Application
    environment: str = "development"
    port: int = 8000
    log_level: str = "info"

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:8000"

    # Rate limiting (slowapi limit string)
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    # Region used for targets when a request does not name one
    default_region: str = "GLOBAL"

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()

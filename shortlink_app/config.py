from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "Link Shortener"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Database
    database_url: str = "sqlite:///./links.db"
    database_pool_size: int = 5  # Ignored for SQLite
    database_timeout_ms: int = 1000  # Upper bound for every hot-path query

    # Link id generation
    id_generator: str = "random_base64"  # Options: "random_base64", "token"
    id_token_bytes: int = 8  # Entropy for the "token" generator

    # Logging
    log_level: str = "INFO"

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def database_timeout(self) -> float:
        """Query timeout in seconds (what asyncio expects)"""
        return self.database_timeout_ms / 1000


# Create settings instance
settings = Settings()

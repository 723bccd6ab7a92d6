from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Books API settings loaded from environment."""

    # Service
    service_name: str = "books-api"
    log_level: str = "INFO"

    # Mode flag: "live" selects the production endpoint, anything else local
    env: str = ""

    # DynamoDB
    table_name: str = "books"
    live_region: str = "eu-west-2"
    local_region: str = "us-east-1"
    local_endpoint_url: str = "http://localhost:8000"  # DynamoDB Local
    local_access_key_id: str = "local"
    local_secret_access_key: str = "local"

    # Store resilience
    store_max_retries: int = 5
    store_base_delay_ms: int = 100
    store_max_delay_ms: int = 10_000
    store_connect_timeout_seconds: int = 5
    store_read_timeout_seconds: int = 10

    @property
    def is_live(self) -> bool:
        return self.env == "live"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()

"""SDK and webhook receiver configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Outbound API
    base_url: str = "https://api.laneful.com"
    api_token: str = ""
    timeout: float = 30.0

    # Inbound webhooks
    webhook_secret: str = ""
    max_webhook_body_bytes: int = 1024 * 1024

    # Receiver
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"
    json_logs: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "LANEFUL_",
    }

    @property
    def webhook_secret_configured(self) -> bool:
        return bool(self.webhook_secret.strip())


settings = Settings()

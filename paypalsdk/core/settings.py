from typing import Literal

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Load .env file automatically
load_dotenv()

API_BASE_SANDBOX = "https://api.sandbox.paypal.com"
API_BASE_LIVE = "https://api.paypal.com"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Credentials
    PAYPAL_CLIENT_ID: str = ""
    PAYPAL_SECRET: str = ""
    PAYPAL_BASE: str = API_BASE_SANDBOX

    # HTTP
    PAYPAL_TIMEOUT: float = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: Literal["development", "test", "production"] = "development"

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

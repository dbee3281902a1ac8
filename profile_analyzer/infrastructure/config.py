import os
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, SecretStr

DEFAULT_PORT = 5000
DEFAULT_CORS_ORIGIN = "http://localhost:3000"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_REQUEST_TIMEOUT = 60.0

class Settings(BaseModel):
    """
    Process-wide configuration, built once at start-up and passed explicitly
    to the client, the analyzer service and the app factory.
    Credentials are SecretStr so they never show up in logs or reprs.
    """
    model_config = ConfigDict(frozen=True)

    github_token: Optional[SecretStr] = None
    review_api_key: Optional[SecretStr] = Field(
        None, description="Reserved for a real review generator"
    )
    port: int = Field(DEFAULT_PORT, gt=0, lt=65536)
    cors_origin: str = DEFAULT_CORS_ORIGIN
    github_api_url: str = DEFAULT_GITHUB_API_URL
    request_timeout: float = Field(DEFAULT_REQUEST_TIMEOUT, gt=0)

    @classmethod
    def from_env(cls) -> "Settings":
        """Reads settings from the environment (call load_dotenv() first)."""
        github_token = os.getenv("GITHUB_TOKEN")
        review_api_key = os.getenv("OPENAI_API_KEY")

        return cls(
            github_token=SecretStr(github_token) if github_token else None,
            review_api_key=SecretStr(review_api_key) if review_api_key else None,
            port=int(os.getenv("PORT") or DEFAULT_PORT),
            cors_origin=os.getenv("CORS_ORIGIN") or DEFAULT_CORS_ORIGIN,
            github_api_url=(os.getenv("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL).rstrip("/"),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT") or DEFAULT_REQUEST_TIMEOUT),
        )

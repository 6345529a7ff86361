from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Backend (Render) - single source
    api_url: str = "https://aerologix-ai-mobile.onrender.com"

    # No local timeout policy beyond the HTTP client default
    request_timeout: float = 30.0

    # JWT issued by /api/auth/login
    auth_token: Optional[str] = None

    # Local-only aircraft fields (photo, category, ...) are kept here
    local_data_path: str = "aerologix_aircraft_local_data.json"

    # Application Configuration
    environment: str = "development"
    log_level: str = "INFO"

    def auth_headers(self) -> dict:
        """Authorization header for the configured token, if any"""
        if not self.auth_token:
            return {}
        return {"Authorization": f"Bearer {self.auth_token}"}

    class Config:
        env_file = ".env"
        case_sensitive = False

@lru_cache()
def get_settings():
    return Settings()

from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    webhook_url: str = "https://n8n.comware.com.co/webhook/AGC_WARE"
    webhook_timeout: Optional[float] = None  # sin timeout explícito
    database_url: str = "sqlite://"
    backend_cors_origins: str = "http://localhost:3000"
    sql_echo: bool = False
    demo_autostart: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "allow"

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.backend_cors_origins.split(",") if origin.strip()]

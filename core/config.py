# contentgen/core/config.py
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# .env is resolved relative to the project root, not the working directory
env_path = os.path.join(os.path.dirname(__file__), "..", ".env")
env_path = os.path.abspath(env_path)
if os.path.exists(env_path):
    load_dotenv(env_path)

class Settings(BaseSettings):
    APP_NAME: str = "AI Content Generator Backend"
    ENV: str = "development"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: str = "*"  # Comma-separated list of allowed origins

    # API Keys
    GEMINI_API_KEY: str | None = None

    # Model Configuration
    MODEL_GEMINI: str = "gemini-2.5-flash"

    # Model-specific Parameters
    DEFAULT_TEMPERATURE: float = 0.7

    # Logging Configuration
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_DIR: str = "logs"    # Directory for log files (empty string to disable file logging)
    LOG_JSON: bool = False   # Use JSON format for logs (useful for production log aggregation)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()

if __name__ == "__main__":
    print(f"MODEL_GEMINI={settings.MODEL_GEMINI}")
    print(f"PORT={settings.PORT}")

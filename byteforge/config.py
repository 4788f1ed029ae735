"""
Application configuration settings
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "ByteForge Content API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # Database MySQL
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 3306
    DATABASE_USER: str = "root"
    DATABASE_PASSWORD: str = ""
    DATABASE_NAME: str = "byteforgedb"

    # Full SQLAlchemy URL, takes precedence over the MySQL parts above
    SQLALCHEMY_DATABASE_URI: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        """Configured database URL, falling back to the MySQL parts"""
        if self.SQLALCHEMY_DATABASE_URI:
            return self.SQLALCHEMY_DATABASE_URI
        return f"mysql+pymysql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"

    # CORS - the single frontend allowed to call the API with credentials
    FRONTEND_ORIGIN: str = "http://localhost:5173"

    # Logging
    LOG_LEVEL: str = "INFO"
    REQUEST_LOG_FILE: Optional[str] = None  # e.g. "logs/requests.log"

    # Content client
    API_BASE_URL: str = "http://localhost:3001"
    CLIENT_TIMEOUT_SECONDS: float = 10.0

    # Progress tracker
    PROGRESS_FILE: str = "progress/topic_progress.json"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

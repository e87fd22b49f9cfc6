from typing import List, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Alternatives Directory"
    API_PREFIX: str = "/api"
    DATABASE_URL: str = "sqlite:///./directory.db"
    AUTO_CREATE_TABLES: bool = True
    LOG_LEVEL: str = "INFO"

    # Identity provider session tokens (e.g. Clerk). For RS256 set the PEM public key.
    AUTH_JWT_KEY: str
    AUTH_JWT_ALGORITHMS: str = "HS256"
    AUTH_JWT_ISSUER: Optional[str] = None

    # MinIO/S3 settings
    STORAGE_ENDPOINT: str = "localhost:9000"
    STORAGE_SECURE: bool = False
    STORAGE_ACCESS_KEY: str = ""
    STORAGE_SECRET_KEY: str = ""
    STORAGE_BUCKET: str = "directory"
    STORAGE_PUBLIC_URL: Optional[str] = None  # CDN base URL, defaults to endpoint/bucket
    STORAGE_FOLDER: str = "reactforvue"

    # Third-party providers
    SCREENSHOTONE_ACCESS_KEY: str = ""
    SCREENSHOTONE_SECRET_KEY: str = ""
    SCREENSHOTONE_URL: str = "https://api.screenshotone.com/take"
    FIRECRAWL_API_KEY: str = ""
    FIRECRAWL_URL: str = "https://api.firecrawl.dev/v1/scrape"
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_MODEL: str = "mistralai/devstral-2512:free"
    HTTP_REQUEST_TIMEOUT: float = 30.0

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'

    @property
    def jwt_algorithms(self) -> List[str]:
        return [alg.strip() for alg in self.AUTH_JWT_ALGORITHMS.split(",") if alg.strip()]

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()

# DEPENDENCIES
from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application-wide settings: primary configuration source
    """
    # Application Info
    APP_NAME               : str           = "Legal Compliance Risk Analyzer"
    APP_VERSION            : str           = "1.0.0"
    API_PREFIX             : str           = "/api/v1"

    # Server Configuration
    HOST                   : str           = "0.0.0.0"
    PORT                   : int           = 8000
    RELOAD                 : bool          = False
    WORKERS                : int           = 1

    # CORS Settings
    CORS_ORIGINS           : list          = ["http://localhost:3000", "http://localhost:8000", "http://127.0.0.1:8000"]
    CORS_ALLOW_CREDENTIALS : bool          = True
    CORS_ALLOW_METHODS     : list          = ["*"]
    CORS_ALLOW_HEADERS     : list          = ["*"]

    # Analysis Limits (enforced by the API layer, never by the detector)
    MIN_WORD_COUNT         : int           = 10
    MAX_CONTRACT_LENGTH    : int           = 500000 # Maximum characters (500KB text)
    EXCERPT_MAX_LENGTH     : int           = 100

    # Logging Settings
    LOG_LEVEL              : str           = "INFO"
    LOG_DIR                : Path          = Path("logs")
    LOG_TO_FILE            : bool          = False
    APP_LOG_NAME           : str           = "legal_analyzer"


    class Config:
        env_file          = ".env"
        env_file_encoding = "utf-8"
        case_sensitive    = True


# Global settings instance
settings = Settings()

"""Configuration management using environment variables.

This module loads configuration from .env file and provides
typed access to configuration values with sensible defaults.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import os
from pathlib import Path
from typing import Optional, List
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()


class Config:
    """Configuration class for the NGO report reviewer.

    Loads configuration from environment variables with fallback defaults.
    All values are loaded once at module import time. The API credential is
    read here but only enforced when the analysis client is initialized.

    Example:
        >>> from utils.config import config
        >>> print(config.ANALYSIS_MODEL)
        'gpt-4o'
        >>> print(config.ANALYSIS_TEMPERATURE)
        0.3
    """

    # Analysis service configuration
    OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")
    ANALYSIS_MODEL: str = os.getenv("ANALYSIS_MODEL", "gpt-4o")
    ANALYSIS_TEMPERATURE: float = float(os.getenv("ANALYSIS_TEMPERATURE", "0.3"))
    ANALYSIS_MAX_TOKENS: int = int(os.getenv("ANALYSIS_MAX_TOKENS", "2000"))
    ANALYSIS_TIMEOUT: float = float(os.getenv("ANALYSIS_TIMEOUT", "60"))

    # Attachment storage
    UPLOADS_DIR: Path = Path(os.getenv("UPLOADS_DIR", "uploads"))

    # Submission policy
    MIN_SUBMISSION_SCORE: int = int(os.getenv("MIN_SUBMISSION_SCORE", "40"))

    # API server
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8200"))

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE", "logs/report_reviewer.log")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    LOG_MAX_BYTES: int = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
    LOG_BACKUP_COUNT: int = int(os.getenv("LOG_BACKUP_COUNT", "3"))
    # Third-party loggers held at WARNING (comma separated)
    QUIET_LOGGERS: List[str] = [
        name.strip()
        for name in os.getenv("QUIET_LOGGERS", "LiteLLM,httpx,httpcore,openpyxl").split(",")
        if name.strip()
    ]

    @classmethod
    def get_uploads_dir(cls) -> Path:
        """Get the absolute uploads directory.

        Relative UPLOADS_DIR values are resolved against the current
        working directory at call time.

        Returns:
            Absolute path to the uploads directory.
        """
        if cls.UPLOADS_DIR.is_absolute():
            return cls.UPLOADS_DIR
        return Path.cwd() / cls.UPLOADS_DIR

    @classmethod
    def validate(cls) -> List[str]:
        """Validate configuration and return list of issues.

        Returns:
            List of validation error messages. Empty list if all valid.

        Example:
            >>> errors = Config.validate()
            >>> if errors:
            ...     print("Configuration errors:", errors)
        """
        errors = []

        if cls.ANALYSIS_TEMPERATURE < 0 or cls.ANALYSIS_TEMPERATURE > 2:
            errors.append(f"ANALYSIS_TEMPERATURE must be 0-2, got {cls.ANALYSIS_TEMPERATURE}")

        if cls.ANALYSIS_MAX_TOKENS < 1:
            errors.append(f"ANALYSIS_MAX_TOKENS must be >= 1, got {cls.ANALYSIS_MAX_TOKENS}")

        if cls.ANALYSIS_TIMEOUT <= 0:
            errors.append(f"ANALYSIS_TIMEOUT must be > 0, got {cls.ANALYSIS_TIMEOUT}")

        if cls.MIN_SUBMISSION_SCORE < 0 or cls.MIN_SUBMISSION_SCORE > 100:
            errors.append(f"MIN_SUBMISSION_SCORE must be 0-100, got {cls.MIN_SUBMISSION_SCORE}")

        if cls.LOG_BACKUP_COUNT < 0:
            errors.append(f"LOG_BACKUP_COUNT must be >= 0, got {cls.LOG_BACKUP_COUNT}")

        return errors


# Global config instance
config = Config()


# Validate configuration on import
_validation_errors = config.validate()
if _validation_errors:
    import warnings
    for error in _validation_errors:
        warnings.warn(f"Configuration warning: {error}")

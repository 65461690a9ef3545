"""
Configuration management for Ministry Companion.

API 키는 시작 시 한 번만 읽고, 생성된 Settings를 각 클라이언트 생성자에 전달합니다.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load environment variables
load_dotenv()

DEFAULT_MODEL = "gemini-2.5-pro"
DEFAULT_CHAT_MODEL = "gemini-2.5-flash"
DEFAULT_ALLOWED_ORIGINS = "http://localhost:8000,http://localhost:8501"


def allowed_origins_from_env() -> List[str]:
    """CORS 허용 origin 목록 (API 키 없이도 읽을 수 있어야 함)"""
    raw = os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """
    Configuration for the provider clients and the surrounding app.
    """

    # Required Configuration
    google_api_key: str

    # Gemini Configuration
    gemini_model: str = DEFAULT_MODEL
    gemini_chat_model: str = DEFAULT_CHAT_MODEL
    temperature: float = 0.7
    max_output_tokens: int = 8192

    # Logging Configuration
    log_level: str = "INFO"

    # API Configuration
    allowed_origins: List[str] = field(
        default_factory=lambda: DEFAULT_ALLOWED_ORIGINS.split(",")
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Create configuration from environment variables.

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If required environment variables are missing
                or a numeric value cannot be parsed
        """
        api_key = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ConfigurationError("GOOGLE_API_KEY environment variable is required")

        try:
            temperature = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))
            max_output_tokens = int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "8192"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric Gemini setting: {e}") from e

        return cls(
            google_api_key=api_key,
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            gemini_chat_model=os.getenv("GEMINI_CHAT_MODEL", DEFAULT_CHAT_MODEL),
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            allowed_origins=allowed_origins_from_env(),
        )


# Global configuration instance
_config: Optional[Settings] = None


def get_config() -> Settings:
    """
    Get the global configuration instance.

    Raises:
        ConfigurationError: If the environment is incomplete
    """
    global _config
    if _config is None:
        _config = Settings.from_env()
    return _config


def reload_config() -> Settings:
    """Reload configuration from environment variables."""
    global _config
    load_dotenv()  # Reload .env file
    _config = Settings.from_env()
    return _config


def set_config(config: Optional[Settings]) -> None:
    """Set (or clear) the global configuration instance."""
    global _config
    _config = config

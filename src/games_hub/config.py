"""
Configuration for the games hub scraper.

Values come from the environment (optionally a .env file in the project root)
and are read once at startup into an immutable Settings object.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Defaults
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ENVIRONMENT = "development"
PRODUCTION = "production"

# Fixed timings (milliseconds)
NAVIGATION_TIMEOUT_MS = 45000
STEAM_RESULTS_TIMEOUT_MS = 10000
SETTLE_TIMEOUT_MS = 3000
BATCH_DELAY_MS = 1000

# Browser fingerprint shared by every store session
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

PRODUCTION_BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, passed explicitly to the components that need them."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    environment: str = DEFAULT_ENVIRONMENT
    headless: bool = True
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == PRODUCTION

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            port=_env_int('PORT', DEFAULT_PORT),
            host=os.getenv('HOST') or DEFAULT_HOST,
            environment=os.getenv('APP_ENV') or DEFAULT_ENVIRONMENT,
            headless=_env_flag('HEADLESS', True),
            log_level=(os.getenv('LOG_LEVEL') or "INFO").upper(),
        )


def get_launch_options(settings: Settings) -> Dict:
    """
    Chromium launch options.

    Production adds the sandbox-disabling flags needed inside containers.
    """
    options: Dict = {'headless': settings.headless}
    if settings.is_production:
        options['args'] = list(PRODUCTION_BROWSER_ARGS)
    return options


def get_context_options() -> Dict:
    """Browser context options that make the session look like a desktop browser."""
    return {
        'user_agent': USER_AGENT,
        'viewport': {'width': SCREEN_WIDTH, 'height': SCREEN_HEIGHT},
        'locale': 'en-US',
        'timezone_id': 'America/New_York',
        'has_touch': False,
        'is_mobile': False,
    }


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Settings read from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings

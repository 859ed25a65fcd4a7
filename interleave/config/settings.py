"""
Centralized Configuration for Interleave
========================================
All configuration values in one place, configurable via environment variables.
"""
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    elif val in ("false", "0", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable."""
    try:
        return int(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def get_app_paths() -> Tuple[str, str]:
    """Get the correct paths based on execution environment."""
    if getattr(sys, 'frozen', False):
        app_dir = os.environ.get('INTERLEAVE_APP_DIR', os.path.dirname(sys.executable))
        bundle_dir = os.environ.get('INTERLEAVE_BUNDLE_DIR', getattr(sys, '_MEIPASS', app_dir))
    else:
        default_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        app_dir = os.environ.get('INTERLEAVE_APP_DIR', default_dir)
        bundle_dir = os.environ.get('INTERLEAVE_BUNDLE_DIR', app_dir)
    return app_dir, bundle_dir


APP_DIR, BUNDLE_DIR = get_app_paths()


@dataclass
class ServerConfig:
    """Flask server configuration."""
    host: str = field(default_factory=lambda: os.environ.get("INTERLEAVE_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _get_int_env("INTERLEAVE_PORT", 8080))
    debug: bool = field(default_factory=lambda: _get_bool_env("INTERLEAVE_DEBUG", False))
    secret_key: str = field(default_factory=lambda: os.environ.get("SECRET_KEY", "dev-key-change-in-production"))

    # CORS settings
    cors_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:8080",
        "http://127.0.0.1:8080",
        "http://localhost:5173",
    ])


@dataclass
class OpenAIConfig:
    """OpenAI Responses API configuration."""
    api_key: str = field(default_factory=lambda: os.environ.get("OPENAI_API_KEY", ""))
    api_url: str = field(default_factory=lambda: os.environ.get(
        "OPENAI_API_URL", "https://api.openai.com/v1/responses"))
    model: str = field(default_factory=lambda: os.environ.get("OPENAI_MODEL", "gpt-4.1"))
    max_output_tokens: int = field(default_factory=lambda: _get_int_env("OPENAI_MAX_OUTPUT_TOKENS", 3000))

    # Timeouts
    timeout: float = field(default_factory=lambda: _get_float_env("OPENAI_TIMEOUT", 60.0))
    pool_size: int = field(default_factory=lambda: _get_int_env("OPENAI_POOL_SIZE", 10))


@dataclass
class StoreConfig:
    """Document store configuration."""
    db_timeout: int = field(default_factory=lambda: _get_int_env("DB_TIMEOUT", 30))
    # Create the translation counter at 0 when the store is first opened
    seed_counter: bool = field(default_factory=lambda: _get_bool_env("SEED_COUNTER", True))


@dataclass
class RequestConfig:
    """Inbound request limits."""
    max_text_length: int = field(default_factory=lambda: _get_int_env("MAX_TEXT_LENGTH", 20000))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    verbose_debug: bool = field(default_factory=lambda: _get_bool_env("VERBOSE_DEBUG", False))
    log_to_file: bool = field(default_factory=lambda: _get_bool_env("LOG_TO_FILE", True))
    log_file_max_bytes: int = field(default_factory=lambda: _get_int_env("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024))
    log_file_backup_count: int = field(default_factory=lambda: _get_int_env("LOG_FILE_BACKUP_COUNT", 5))


@dataclass
class PathConfig:
    """Path configuration."""
    app_dir: str = field(default_factory=lambda: APP_DIR)
    bundle_dir: str = field(default_factory=lambda: BUNDLE_DIR)

    @property
    def static_folder(self) -> str:
        return os.path.join(self.bundle_dir, 'static')

    @property
    def log_folder(self) -> Path:
        return Path(self.app_dir) / 'logs'

    @property
    def db_path(self) -> str:
        return os.environ.get('INTERLEAVE_DB_PATH', os.path.join(self.app_dir, 'interleave.db'))


@dataclass
class Config:
    """Main application configuration container."""
    server: ServerConfig = field(default_factory=ServerConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    request: RequestConfig = field(default_factory=RequestConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    paths: PathConfig = field(default_factory=PathConfig)

    def __post_init__(self):
        """Create necessary directories after initialization."""
        self._create_directories()
        self._validate()

    def _create_directories(self):
        """Create necessary directories."""
        if self.logging.log_to_file:
            os.makedirs(self.paths.log_folder, exist_ok=True)

    def _validate(self):
        """Validate configuration values."""
        if self.openai.timeout <= 0:
            raise ValueError("openai timeout must be positive")
        if self.openai.max_output_tokens < 1:
            raise ValueError("max_output_tokens must be at least 1")
        if self.request.max_text_length < 1:
            raise ValueError("max_text_length must be at least 1")
        if self.store.db_timeout < 1:
            raise ValueError("db_timeout must be at least 1")


# Global configuration instance
config = Config()

"""
Centralized settings and path configuration for the apparel pricing tool.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


ENV_PREFIX = "APPAREL_PRICING_"


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    # Walk up from this file to find the project root
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path
    data_dir: Path

    # Output files
    price_sheet: Path
    build_report: Path

    # Display
    currency_symbol: str = "₱"

    # Runtime
    log_level: str = "INFO"
    cors_origins: tuple = ("*",)

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        root = project_root or get_project_root()

        data_dir = Path(_env("DATA_DIR", str(root / 'data')))

        origins = _env("CORS_ORIGINS")
        cors_origins = tuple(o.strip() for o in origins.split(',') if o.strip()) if origins else ("*",)

        return cls(
            project_root=root,
            data_dir=data_dir,
            price_sheet=data_dir / 'price_sheet.csv',
            build_report=data_dir / 'build_report.json',
            currency_symbol=_env("CURRENCY", "₱"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            cors_origins=cors_origins,
        )

    def format_amount(self, amount: float) -> str:
        """Format an amount the way the dashboards show it, e.g. ₱1,250."""
        return f"{self.currency_symbol}{amount:,.0f}"


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None

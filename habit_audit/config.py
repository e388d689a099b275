"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at startup (fail fast)
- Type safety with Pydantic
- Scoring knobs live here, marker data lives in the catalog
"""

import os
from functools import lru_cache
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

# Load environment variables from .env file
load_dotenv()


class ScoringConfig(BaseModel):
    """Report thresholds and catalog source."""

    recommendation_limit: int = Field(
        default=3, ge=0, description="Number of top actions shown in the report"
    )
    celebrate_threshold: float = Field(
        default=90.0, ge=0.0, le=100.0, description="Score at or above which to celebrate"
    )
    green_threshold: float = Field(
        default=90.0, ge=0.0, le=100.0, description="Lowest score rendered green"
    )
    amber_threshold: float = Field(
        default=70.0, ge=0.0, le=100.0, description="Lowest score rendered amber"
    )
    catalog_path: str | None = Field(
        default=None, description="JSON catalog file; built-in catalog when unset"
    )

    @model_validator(mode="after")
    def amber_below_green(self) -> "ScoringConfig":
        if self.amber_threshold > self.green_threshold:
            raise ValueError("amber_threshold must not exceed green_threshold")
        return self


class SessionDefaults(BaseModel):
    """Initial selections for a new audit session."""

    region: str = Field(default="uk", min_length=1)
    age_range: str = Field(default="25-34")
    gender: str = Field(default="other")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class AppConfig(BaseModel):
    """Main application configuration combining all subsystems."""

    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    session: SessionDefaults = Field(default_factory=SessionDefaults)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "AppConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables with validation."""

    def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
        v = val.strip().lower()
        if v in {"dev", "development"}:
            return "development"
        if v in {"stage", "staging"}:
            return "staging"
        return "production"

    def _level_to_literal(val: str) -> Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        v = val.strip().upper()
        return cast(
            Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO",
        )

    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    scoring_config = ScoringConfig(
        recommendation_limit=int(os.getenv("RECOMMENDATION_LIMIT", "3")),
        celebrate_threshold=float(os.getenv("CELEBRATE_THRESHOLD", "90")),
        catalog_path=os.getenv("CATALOG_PATH") or None,
    )

    session_defaults = SessionDefaults(
        region=os.getenv("DEFAULT_REGION", "uk"),
        age_range=os.getenv("DEFAULT_AGE_RANGE", "25-34"),
        gender=os.getenv("DEFAULT_GENDER", "other"),
    )

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    return AppConfig(
        environment=environment,
        debug=debug,
        scoring=scoring_config,
        session=session_defaults,
        logging=logging_config,
    )


@lru_cache
def get_config() -> AppConfig:
    """Get cached application configuration."""
    return load_config_from_env()


def validate_config() -> None:
    """Validate configuration at startup."""
    try:
        config = get_config()
        print(f"Configuration loaded for {config.environment} environment")
        if config.scoring.catalog_path:
            print(f"Catalog file: {config.scoring.catalog_path}")
    except Exception as e:
        print(f"Configuration validation failed: {e}")
        raise


def print_config_summary() -> None:
    """Print configuration summary for debugging."""
    config = get_config()

    print("\nCONFIGURATION SUMMARY")
    print(f"Environment: {config.environment}")
    print(f"Debug Mode: {config.debug}")
    print(f"Log Level: {config.logging.level}")

    print("\nSCORING")
    print(f"Top actions: {config.scoring.recommendation_limit}")
    print(f"Green from: {config.scoring.green_threshold:g}")
    print(f"Amber from: {config.scoring.amber_threshold:g}")
    print(f"Catalog: {config.scoring.catalog_path or 'built-in'}")

    print("\nSESSION DEFAULTS")
    print(f"Region: {config.session.region}")
    print(f"Demographic: {config.session.gender}, {config.session.age_range}")


if __name__ == "__main__":
    validate_config()
    print_config_summary()

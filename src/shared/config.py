"""Configuration for the expense function."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError


class Settings(BaseModel):
    """Settings read from the Lambda environment."""

    model_config = ConfigDict(frozen=True)

    supabase_url: str = Field(..., description="Supabase project URL")
    supabase_anon_key: str = Field(..., description="Supabase anonymous API key")
    expenses_table: str = Field("expenses", description="Table holding expense rows")
    log_level: str = Field("INFO", description="Root logger level")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Validated settings

        Raises:
            ConfigurationError: If a required variable is missing or blank
        """
        if environ is None:
            environ = os.environ

        required = {
            'supabase_url': 'SUPABASE_URL',
            'supabase_anon_key': 'SUPABASE_ANON_KEY'
        }

        values = {}
        missing = []
        for field, variable in required.items():
            value = (environ.get(variable) or '').strip()
            if not value:
                missing.append(variable)
            values[field] = value

        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        if not values['supabase_url'].startswith(('http://', 'https://')):
            raise ConfigurationError("SUPABASE_URL must be an http(s) URL")

        values['expenses_table'] = (environ.get('EXPENSES_TABLE') or 'expenses').strip()
        values['log_level'] = (environ.get('LOG_LEVEL') or 'INFO').strip().upper()

        return cls(**values)

"""Option models and logging setup."""

from temporal.config.logging import configure_logging
from temporal.config.models import RoundingOptions, ToStringOptions, validate_options

__all__ = [
    "RoundingOptions",
    "ToStringOptions",
    "configure_logging",
    "validate_options",
]

"""Action input configuration."""

from setup_aqua.config.loader import ConfigError, load_inputs
from setup_aqua.config.models import ActionInputs

__all__ = ["ActionInputs", "ConfigError", "load_inputs"]

"""Action input loading and merging.

Handles loading inputs with:
- GitHub Actions inputs (INPUT_<NAME> environment variables)
- An optional YAML inputs file (--config)
- Environment variable expansion in YAML values (${VAR})
- CLI overrides with the highest precedence
"""

from __future__ import annotations

import os
import re
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from setup_aqua.config.models import DEFAULT_AQUA_OPTS, ActionInputs
from setup_aqua.core.logging import get_logger

LOGGER = get_logger(__name__)

VALID_INPUT_KEYS = (
    "aqua_version",
    "github_token",
    "enable_aqua_install",
    "aqua_opts",
    "policy_allow",
    "skip_install_aqua",
    "working_directory",
)

_BOOL_KEYS = frozenset({"enable_aqua_install", "skip_install_aqua"})

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Input loading or parsing error."""

    pass


def load_inputs(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> ActionInputs:
    """Load action inputs with proper precedence.

    Precedence (highest to lowest):
    1. CLI flags (cli_overrides)
    2. GitHub Actions inputs (INPUT_* variables)
    3. YAML inputs file (config_path)
    4. Built-in defaults

    Args:
        environ: Environment to read INPUT_* from (defaults to os.environ).
        config_path: Optional path to a YAML inputs file.
        cli_overrides: Dict of CLI flag overrides; None values are ignored.

    Returns:
        ActionInputs instance.

    Raises:
        ConfigError: If the file is missing or invalid, or aqua_version is unset.
    """
    env = os.environ if environ is None else environ
    merged: Dict[str, Any] = {}

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            merged.update(load_yaml_file(config_path, env))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        LOGGER.debug(f"Loaded inputs from {config_path}")

    action_inputs = read_action_inputs(env)
    if action_inputs:
        LOGGER.debug(f"Loaded action inputs: {sorted(action_inputs)}")
    merged.update(action_inputs)

    if cli_overrides:
        merged.update({k: v for k, v in cli_overrides.items() if v is not None})

    return dict_to_inputs(merged)


def read_action_inputs(environ: Mapping[str, str]) -> Dict[str, str]:
    """Read non-empty GitHub Actions inputs from the environment.

    GitHub exposes an input named ``aqua_version`` as ``INPUT_AQUA_VERSION``.
    """
    inputs: Dict[str, str] = {}
    for key in VALID_INPUT_KEYS:
        value = environ.get(f"INPUT_{key.upper()}", "").strip()
        if value:
            inputs[key] = value
    return inputs


def load_yaml_file(path: Path, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Load and parse a YAML inputs file.

    Performs environment variable expansion on string values and warns
    about unknown keys.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    for key in data:
        if key not in VALID_INPUT_KEYS:
            msg = f"Unknown input '{key}' in {path}"
            suggestion = _suggest_key(str(key))
            if suggestion:
                msg += f" (did you mean '{suggestion}'?)"
            LOGGER.warning(msg)

    env = os.environ if environ is None else environ
    return {k: expand_env_vars(v, env) for k, v in data.items() if k in VALID_INPUT_KEYS}


def expand_env_vars(data: Any, environ: Mapping[str, str]) -> Any:
    """Recursively expand ${VAR} and ${VAR:-default} in string values."""
    if isinstance(data, dict):
        return {k: expand_env_vars(v, environ) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item, environ) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(lambda m: _env_var_replacer(m, environ), data)
    else:
        return data


def _env_var_replacer(match: re.Match[str], environ: Mapping[str, str]) -> str:
    var_name = match.group(1)
    default_value = match.group(2)

    value = environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def _suggest_key(invalid_key: str) -> Optional[str]:
    matches = get_close_matches(invalid_key, list(VALID_INPUT_KEYS), n=1, cutoff=0.6)
    return matches[0] if matches else None


def parse_bool(key: str, value: Any) -> bool:
    """Parse an action boolean input ("true"/"false", any case)."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ConfigError(f"Input '{key}' must be 'true' or 'false', got {value!r}")


def parse_opts(value: Any) -> list:
    """Split aqua_opts on whitespace; a list of strings is taken as is."""
    if isinstance(value, list):
        return [str(item) for item in value if str(item)]
    return str(value).split()


def dict_to_inputs(data: Dict[str, Any]) -> ActionInputs:
    """Convert merged raw values to ActionInputs."""
    version = str(data.get("aqua_version") or "").strip()
    if not version:
        raise ConfigError("aqua_version is required")

    bools = {key: parse_bool(key, data[key]) for key in _BOOL_KEYS if key in data}

    opts = parse_opts(data["aqua_opts"]) if "aqua_opts" in data else list(DEFAULT_AQUA_OPTS)

    policy_allow = data.get("policy_allow")
    if isinstance(policy_allow, bool):
        policy_allow = "true" if policy_allow else None

    working_directory = data.get("working_directory")

    return ActionInputs(
        aqua_version=version,
        github_token=str(data.get("github_token") or ""),
        enable_aqua_install=bools.get("enable_aqua_install", True),
        aqua_opts=opts,
        policy_allow=str(policy_allow) if policy_allow else None,
        skip_install_aqua=bools.get("skip_install_aqua", False),
        working_directory=Path(working_directory) if working_directory else Path.cwd(),
    )

"""
Configuration Loader - Filing Calendar and Signal Settings from YAML.

A config file holds up to three top-level sections:

    version           free-form config version string
    filing_calendar   month -> safe filing quarter rules
    signals           factor ranges, thresholds, optional Quality signal

Profiles are partial overlays stored beside the config file, in
``profiles/<name>.yaml``. Mappings merge key by key; lists (the calendar
rules) are replaced whole, since a calendar only validates when every
month is covered exactly once.

Design Notes:
    - Validation failures surface as ConfigurationError, one problem per
      offending field, prefixed with its section path
      (e.g. "signals.thresholds: bearish threshold 0.6 must be below ...")
    - Unknown sections are logged and ignored
    - Calling load() without a path yields the built-in defaults
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from fundamental_signals.config.models import FundamentalSignalsConfig
from fundamental_signals.errors import ConfigurationError

logger = logging.getLogger(__name__)

SECTIONS = ("version", "filing_calendar", "signals")
PROFILE_DIR = "profiles"


def merge_sections(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
) -> Dict[str, Any]:
    """Overlay a profile onto a config mapping without mutating either."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_sections(current, value)
        else:
            merged[key] = value
    return merged


def _describe(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error["loc"]) or "config"
    message = str(error["msg"])
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{location}: {message}"


class ConfigLoader:
    """Builds a validated FundamentalSignalsConfig from YAML sources."""

    def __init__(self, base_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory that relative config paths resolve against
        """
        self._base_path = Path(base_path) if base_path else Path(".")

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> FundamentalSignalsConfig:
        """
        Load a config file, optionally overlaid with a named profile.

        Args:
            config_path: YAML file; built-in defaults when omitted
            profile: Name of a file in the ``profiles/`` directory beside
                the config file (``<base_path>/config/profiles`` when no
                file is given)

        Returns:
            Validated FundamentalSignalsConfig

        Raises:
            FileNotFoundError: If the config or profile file is missing
            ConfigurationError: If a file is malformed or fails validation
        """
        if config_path is None:
            raw: Dict[str, Any] = {}
            source = "built-in defaults"
            profile_root = self._base_path / "config"
        else:
            path = self._resolve(config_path)
            raw = self._read(path)
            source = str(path)
            profile_root = path.parent

        if profile:
            overlay_path = profile_root / PROFILE_DIR / f"{profile}.yaml"
            if not overlay_path.exists():
                raise FileNotFoundError(
                    f"Profile '{profile}' not found at {overlay_path}"
                )
            raw = merge_sections(raw, self._read(overlay_path))
            source = f"{source} (profile {profile})"

        config = self.load_from_dict(raw, source=source)
        logger.debug(
            f"Loaded configuration from {source}: "
            f"{len(config.filing_calendar.rules)} filing rules, thresholds "
            f"{config.signals.thresholds.bearish}/{config.signals.thresholds.bullish}"
        )
        return config

    def load_from_dict(
        self,
        raw: Mapping[str, Any],
        source: str = "mapping",
    ) -> FundamentalSignalsConfig:
        """
        Validate an already-parsed config mapping.

        Raises:
            ConfigurationError: If any section fails validation
        """
        unknown = sorted(set(raw) - set(SECTIONS))
        if unknown:
            logger.warning(f"Ignoring unknown config sections in {source}: {unknown}")

        try:
            return FundamentalSignalsConfig.model_validate(dict(raw))
        except ValidationError as exc:
            problems: List[str] = [_describe(error) for error in exc.errors()]
            raise ConfigurationError(
                f"Invalid configuration in {source}: {'; '.join(problems)}",
                source=source,
                problems=problems,
            ) from exc

    def _resolve(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Malformed YAML in {path}: {exc}", source=str(path)
            ) from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{path} must contain a mapping of config sections, "
                f"got {type(data).__name__}",
                source=str(path),
            )
        return data


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Union[str, Path]] = None,
) -> FundamentalSignalsConfig:
    """Shorthand for ConfigLoader(base_path).load(config_path, profile)."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)

"""Rules configuration loader for data-driven combat.

This module loads the combat rules (starting hit points, attack powers and
the first attack power tried by the Elf power search) from a YAML file, so
the numbers are defined externally rather than hardcoded in the engine.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .data import DEFAULT_HIT_POINTS, FACTION_DATA, Faction

DEFAULT_SEARCH_START_POWER = 4


@dataclass
class RulesConfig:
    """Container for rules configuration data."""

    hit_points: int = DEFAULT_HIT_POINTS
    attack_power: dict[Faction, int] = field(default_factory=lambda: {
        faction: info.attack_power for faction, info in FACTION_DATA.items()
    })
    search_start_power: int = DEFAULT_SEARCH_START_POWER

    @classmethod
    def from_dict(cls, config_data: dict[str, Any]) -> "RulesConfig":
        """Build a config from parsed YAML, falling back to defaults per key.

        Raises:
            ValueError: If a section has the wrong shape or a value is not a
                positive integer
        """
        config = cls()
        units = config_data.get("units") or {}
        search = config_data.get("power_search") or {}
        if not isinstance(units, dict) or not isinstance(search, dict):
            raise ValueError("'units' and 'power_search' must be mappings")

        config.hit_points = _positive_int(units.get("hit_points", config.hit_points), "units.hit_points")

        powers = units.get("attack_power") or {}
        if not isinstance(powers, dict):
            raise ValueError("'units.attack_power' must be a mapping")
        for faction in Faction:
            key = faction.name.lower()
            if key in powers:
                config.attack_power[faction] = _positive_int(powers[key], f"units.attack_power.{key}")

        config.search_start_power = _positive_int(
            search.get("start_power", config.search_start_power), "power_search.start_power"
        )
        return config

    def with_overrides(self, overrides: Optional[dict[str, Any]]) -> "RulesConfig":
        """Return a new config with a partial YAML-shaped mapping applied on top."""
        if not overrides:
            return self
        merged: dict[str, Any] = {
            "units": {
                "hit_points": self.hit_points,
                "attack_power": {f.name.lower(): p for f, p in self.attack_power.items()},
            },
            "power_search": {"start_power": self.search_start_power},
        }
        for section, values in overrides.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                for key, value in values.items():
                    if isinstance(value, dict) and isinstance(merged[section].get(key), dict):
                        merged[section][key].update(value)
                    else:
                        merged[section][key] = value
            else:
                merged[section] = values
        return RulesConfig.from_dict(merged)


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"'{name}' must be a positive integer, got {value!r}")
    return value


class RulesLoader:
    """Loader for rules configuration files with caching and fallbacks."""

    def __init__(self, rules_path: Optional[str] = None):
        self.rules_path = rules_path or self._find_default_rules_path()
        self._cached_config: Optional[RulesConfig] = None

    def _find_default_rules_path(self) -> str:
        """Find the default rules.yaml file relative to the package."""
        # Start from this file's directory and walk up to find assets/rules.yaml
        current_dir = Path(__file__).parent
        for _ in range(5):  # Limit search depth
            rules_path = current_dir / "assets" / "rules.yaml"
            if rules_path.exists():
                return str(rules_path)
            current_dir = current_dir.parent

        # Fallback: assume it's in the project root
        return "assets/rules.yaml"

    def load_config(self, force_reload: bool = False) -> RulesConfig:
        """Load rules configuration, using cache if available.

        A missing file yields the built-in defaults; a file that exists but
        cannot be parsed raises ValueError.
        """
        if self._cached_config is not None and not force_reload:
            return self._cached_config

        if os.path.exists(self.rules_path):
            try:
                with open(self.rules_path, "r", encoding="utf-8") as file:
                    config_data = yaml.safe_load(file) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Failed to parse rules file {self.rules_path}: {e}") from e
            if not isinstance(config_data, dict):
                raise ValueError(f"Rules file {self.rules_path} must contain a mapping")
            self._cached_config = RulesConfig.from_dict(config_data)
        else:
            self._cached_config = RulesConfig()

        return self._cached_config


# Global loader instance for easy access
_default_loader = RulesLoader()


def get_rules_config(force_reload: bool = False) -> RulesConfig:
    """Get the default rules configuration."""
    return _default_loader.load_config(force_reload)

"""Configuration management for StateAuditor."""

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path


class ConfigError(ValueError):
    """Raised when a [tool.stateauditor] table cannot be applied."""


@dataclass(frozen=True)
class HookRuleConfig:
    """Names the hook rule tracks.

    Defaults describe React's useState/useMemo pair. Any other ecosystem
    with the same value + setter convention can be audited by swapping them.
    """

    tracked_module: str = "react"
    initializer_export: str = "useState"
    memoizer_export: str = "useMemo"
    setter_prefix: str = "set"

    def expected_setter(self, value_name: str) -> str:
        """Return the setter name that pairs with ``value_name``."""
        return f"{self.setter_prefix}{value_name[:1].upper()}{value_name[1:]}"

    def value_from_setter(self, setter_name: str) -> str | None:
        """Recover the value name from a conventionally named setter.

        ``setColor`` gives ``color``; names that do not start with the prefix
        followed by an upper-case character give None.
        """
        prefix = self.setter_prefix
        if not setter_name.startswith(prefix):
            return None

        remainder = setter_name[len(prefix):]
        if not remainder or not remainder[0].isupper():
            return None

        return remainder[0].lower() + remainder[1:]


DEFAULT_CONFIG = HookRuleConfig()


def load_config(pyproject_path: str | Path | None = None) -> HookRuleConfig:
    """Load rule config from the [tool.stateauditor] table of a pyproject.toml.

    A missing file or table gives the defaults.
    """
    if pyproject_path is None:
        return DEFAULT_CONFIG

    path = Path(pyproject_path)
    if not path.exists():
        return DEFAULT_CONFIG

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    table = data.get("tool", {}).get("stateauditor")
    if not table:
        return DEFAULT_CONFIG

    known = {f.name for f in fields(HookRuleConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigError(f"Unknown [tool.stateauditor] keys in {path}: {', '.join(unknown)}")

    for key, value in table.items():
        if not isinstance(value, str) or not value:
            raise ConfigError(f"[tool.stateauditor] {key} must be a non-empty string")

    return replace(DEFAULT_CONFIG, **table)

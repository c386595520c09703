"""Configuration model and loaders for the Sorbet CLI.

Responsibilities:
- Define CLI/file-helper settings as a typed dataclass.
- Load settings from YAML files and environment variables.
- Resolve effective settings with deterministic source precedence.

Key types:
- `SorbetConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `SorbetConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, fields, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})
_BOOLEAN_HINT = "(`true`/`false`, `1`/`0`, `yes`/`no`)"


def _clean_text(value: object) -> str | None:
    """Return the stripped text of a value, or `None` when it is missing or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_boolean(value: object) -> bool | None:
    """Coerce a bool or textual boolean token; `None` means not a boolean."""

    if isinstance(value, bool):
        return value
    token = _clean_text(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


@dataclass(frozen=True, slots=True)
class SorbetConfig:
    """Settings for CLI commands and file helpers.

    Attributes:
        encoding: Text encoding used to read and write files.
        strict: Whether any diagnostic makes a command fail.
        sort_keys: Whether formatted output is emitted in sorted key order.
        trailing_newline: Whether written files end with one newline.
        verbose: Whether command events and parser debug records are logged.
    """

    encoding: str = "utf-8"
    strict: bool = False
    sort_keys: bool = False
    trailing_newline: bool = True
    verbose: bool = False

    def validate(self) -> None:
        """Validate settings before use."""

        if not self.encoding.strip():
            raise ValueError("`encoding` must be a non-empty codec name.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"`encoding` names an unknown codec: `{self.encoding}`.") from exc


_BOOLEAN_FIELDS = ("strict", "sort_keys", "trailing_newline", "verbose")
_SUPPORTED_KEYS = frozenset(item.name for item in fields(SorbetConfig))
_ENV_KEYS = {
    "encoding": "SORBET_ENCODING",
    "strict": "SORBET_STRICT",
    "sort_keys": "SORBET_SORT_KEYS",
    "trailing_newline": "SORBET_TRAILING_NEWLINE",
    "verbose": "SORBET_VERBOSE",
}


class ConfigLoader:
    """Construction helpers for `SorbetConfig`."""

    @staticmethod
    def from_yaml(path: Path) -> SorbetConfig:
        """Load settings from a YAML file.

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If the payload is not a mapping or holds invalid values.
        """

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build(SorbetConfig(), payload, f"YAML config `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SorbetConfig:
        """Load settings from `SORBET_*` environment variables."""

        return ConfigLoader._apply_env(SorbetConfig(), os.environ if env is None else env)

    @staticmethod
    def resolve(
        config_path: Path | None = None,
        env: Mapping[str, str] | None = None,
        overrides: Mapping[str, object] | None = None,
    ) -> SorbetConfig:
        """Resolve settings with precedence overrides > env > YAML file > defaults.

        `None` values in `overrides` mean "not given" and are skipped.
        """

        config = ConfigLoader.from_yaml(config_path) if config_path is not None else SorbetConfig()
        config = ConfigLoader._apply_env(config, os.environ if env is None else env)
        given = {key: value for key, value in (overrides or {}).items() if value is not None}
        return ConfigLoader._build(config, given, "CLI overrides")

    @staticmethod
    def _apply_env(base: SorbetConfig, env: Mapping[str, str]) -> SorbetConfig:
        """Layer set, non-blank environment values on top of `base`."""

        payload: dict[str, object] = {}
        for key, env_key in _ENV_KEYS.items():
            if _clean_text(env.get(env_key)) is not None:
                payload[key] = env[env_key]
        return ConfigLoader._build(base, payload, "Environment")

    @staticmethod
    def _build(base: SorbetConfig, payload: Mapping[str, Any], source_label: str) -> SorbetConfig:
        """Apply a payload onto `base`, validating keys and values."""

        unknown = sorted(str(key) for key in set(payload).difference(_SUPPORTED_KEYS))
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

        changes: dict[str, Any] = {}
        for key, raw_value in payload.items():
            if key in _BOOLEAN_FIELDS:
                parsed = _coerce_boolean(raw_value)
                if parsed is None:
                    raise ValueError(
                        f"{source_label} field `{key}` must be a boolean value {_BOOLEAN_HINT}."
                    )
                changes[key] = parsed
            else:
                text = _clean_text(raw_value)
                if text is None:
                    raise ValueError(f"{source_label} field `{key}` must be a non-empty string.")
                changes[key] = text

        config = replace(base, **changes)
        config.validate()
        return config

"""YAML configuration loader.

Reads `.anchor.yml`:

    ignore_type_checking: false
    exclude: [migrations]
    rules:
      - type: no_transitive_dependency
        modules: ["myapp.domain.**"]
        forbidden_modules: [sqlalchemy, myapp.infrastructure]
      - type: must_use_module
        paths: ["myapp/contexts/**/*.py"]
        recursive: true
        required_modules: [myapp.context]

FAIL-FIRST: any structural problem raises ConfigurationError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from anchor.domain.exceptions.configuration import ConfigurationError
from anchor.domain.exceptions.validation import RuleValidationError
from anchor.domain.model.configuration import DEFAULT_EXCLUDES, DependencyConfig
from anchor.domain.model.enums import RuleType, Severity
from anchor.domain.model.module_id import ModuleID
from anchor.domain.model.rule import DependencyRule

CONFIG_FILENAME = ".anchor.yml"

_RULE_KEYS = frozenset(
    {
        "type",
        "name",
        "modules",
        "paths",
        "forbidden_modules",
        "required_modules",
        "severity",
        "recursive",
    }
)


def find_config(start: Path) -> Path | None:
    """Find configuration file in start or its parents.

    Args:
        start: Directory to search from

    Returns:
        Path of the nearest `.anchor.yml`, None if there is none
    """
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None) -> DependencyConfig:
    """Load configuration.

    Args:
        path: Configuration file, None for no file

    Returns:
        Parsed configuration, empty if path is None

    Raises:
        ConfigurationError: Unreadable file, invalid YAML or invalid structure
    """
    if path is None:
        return DependencyConfig.empty()

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(path, str(e)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(path, f"invalid YAML: {e}") from e

    return parse_config(data, path)


def parse_config(data: Any, path: Path) -> DependencyConfig:
    """Build configuration from decoded YAML document.

    Args:
        data: Decoded document (None for an empty file)
        path: Source of the document, for error messages

    Raises:
        ConfigurationError: Invalid structure
    """
    if data is None:
        return DependencyConfig.empty()
    if not isinstance(data, dict):
        raise ConfigurationError(path, "top level must be a mapping")

    raw_rules = data.get("rules") or []
    if not isinstance(raw_rules, list):
        raise ConfigurationError(path, "'rules' must be a list")

    ignore_type_checking = data.get("ignore_type_checking", False)
    if not isinstance(ignore_type_checking, bool):
        raise ConfigurationError(path, "'ignore_type_checking' must be true or false")

    exclude = DEFAULT_EXCLUDES | frozenset(_strings(data, "exclude", path))

    rules = tuple(_parse_rule(raw, index, path) for index, raw in enumerate(raw_rules))

    return DependencyConfig(
        rules=rules,
        ignore_type_checking=ignore_type_checking,
        exclude=exclude,
    )


def _parse_rule(raw: Any, index: int, path: Path) -> DependencyRule:
    if not isinstance(raw, dict):
        raise ConfigurationError(path, f"rule #{index + 1} must be a mapping")

    unknown = set(raw) - _RULE_KEYS
    if unknown:
        raise ConfigurationError(path, f"rule #{index + 1} has unknown keys {sorted(unknown)}")

    type_name = raw.get("type")
    try:
        rule_type = RuleType(type_name)
    except ValueError as e:
        raise ConfigurationError(path, f"rule #{index + 1} has unknown type {type_name!r}") from e

    severity_name = str(raw.get("severity", "error")).upper()
    try:
        severity = Severity[severity_name]
    except KeyError as e:
        raise ConfigurationError(
            path, f"rule #{index + 1} has unknown severity {severity_name.lower()!r}"
        ) from e

    recursive = raw.get("recursive", True)
    if not isinstance(recursive, bool):
        raise ConfigurationError(path, f"rule #{index + 1}: 'recursive' must be true or false")

    try:
        return DependencyRule(
            rule_type=rule_type,
            name=raw.get("name"),
            modules=tuple(_strings(raw, "modules", path)),
            paths=tuple(_strings(raw, "paths", path)),
            forbidden_modules=_modules(raw, "forbidden_modules", path),
            required_modules=_modules(raw, "required_modules", path),
            severity=severity,
            recursive=recursive,
        )
    except RuleValidationError as e:
        raise ConfigurationError(path, str(e)) from e


def _strings(raw: dict[str, Any], key: str, path: Path) -> list[str]:
    """Read optional list of strings."""
    value = raw.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(path, f"'{key}' must be a list of strings")
    return value


def _modules(raw: dict[str, Any], key: str, path: Path) -> frozenset[ModuleID]:
    """Read optional list of dotted module names."""
    try:
        return frozenset(ModuleID.parse(name) for name in _strings(raw, key, path))
    except ValueError as e:
        raise ConfigurationError(path, f"'{key}': {e}") from e

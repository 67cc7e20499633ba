"""Configuration loading for tsdocgen (package.json plus tsdocgen.yml / tsdocgen.json)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import yaml

from .errors import DocsError

CONFIG_FILE_NAMES = ("tsdocgen.yml", "tsdocgen.json")


class ConfigError(DocsError):
    """Raised when project metadata or the configuration file cannot be used."""


@dataclass(frozen=True)
class PackageInfo:
    """Project metadata read from package.json."""

    name: str
    homepage: str


@dataclass(frozen=True)
class Settings:
    """Effective settings for one documentation run."""

    project_name: str = ""
    project_homepage: str = ""
    src_dir: str = "src"
    out_dir: str = "docs"
    theme: str = "pmarsceill/just-the-docs"
    enable_search: bool = True
    enforce_descriptions: bool = False
    enforce_examples: bool = False
    enforce_version: bool = True
    exclude: Tuple[str, ...] = ()
    parse_compiler_options: Dict[str, Any] = field(default_factory=dict)
    examples_compiler_options: Dict[str, Any] = field(default_factory=dict)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


# file key -> (Settings field, predicate, expected type description)
_FILE_KEYS: Dict[str, Tuple[str, Callable[[Any], bool], str]] = {
    "projectHomepage": ("project_homepage", _is_str, "string"),
    "srcDir": ("src_dir", _is_str, "string"),
    "outDir": ("out_dir", _is_str, "string"),
    "theme": ("theme", _is_str, "string"),
    "enableSearch": ("enable_search", _is_bool, "boolean"),
    "enforceDescriptions": ("enforce_descriptions", _is_bool, "boolean"),
    "enforceExamples": ("enforce_examples", _is_bool, "boolean"),
    "enforceVersion": ("enforce_version", _is_bool, "boolean"),
    "exclude": ("exclude", _is_str_list, "list of strings"),
    "parseCompilerOptions": ("parse_compiler_options", _is_mapping, "mapping"),
    "examplesCompilerOptions": ("examples_compiler_options", _is_mapping, "mapping"),
}


def load_package_info(root: Path) -> PackageInfo:
    """Read `name` and `homepage` from the project's package.json."""
    package_path = root / "package.json"
    try:
        text = package_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read package.json in {root}: {exc}") from exc
    return parse_package_json(text)


def parse_package_json(text: str) -> PackageInfo:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Unable to parse package.json: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("package.json must contain an object at the root")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigError("Missing name in package.json")
    homepage = data.get("homepage")
    if not isinstance(homepage, str) or not homepage:
        raise ConfigError("Missing homepage in package.json")
    return PackageInfo(name=name, homepage=homepage)


def load_settings(root: Path, package: PackageInfo) -> Settings:
    """Layer defaults, project metadata and the optional configuration file."""
    settings = Settings(project_name=package.name, project_homepage=package.homepage)
    config_file = find_config_file(root)
    if config_file is None:
        return settings
    return apply_overrides(settings, _read_config(config_file))


def find_config_file(root: Path) -> Optional[Path]:
    for name in CONFIG_FILE_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def apply_overrides(settings: Settings, overrides: Mapping[str, Any]) -> Settings:
    """Return `settings` updated with camelCase file keys, validating every value."""
    problems: List[str] = []
    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        spec = _FILE_KEYS.get(key)
        if spec is None:
            problems.append(f"- {key}: unknown setting")
            continue
        attribute, predicate, expected = spec
        if not predicate(value):
            problems.append(f"- {key}: expected {expected}, got {value!r}")
            continue
        changes[attribute] = tuple(value) if attribute == "exclude" else value
    if problems:
        raise ConfigError("Invalid configuration file detected:\n" + "\n".join(problems))
    return replace(settings, **changes)


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


__all__ = [
    "CONFIG_FILE_NAMES",
    "ConfigError",
    "PackageInfo",
    "Settings",
    "apply_overrides",
    "find_config_file",
    "load_package_info",
    "load_settings",
    "parse_package_json",
]

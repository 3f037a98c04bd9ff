"""Run configuration for the types generator.

Configuration files are YAML and use the generator's historical camelCase
keys::

    namespaces:
      entity: app.entity
    useRte: true
    annotationGenerators: [doc, validation]
    types:
      Book:
        parent: CreativeWork
        properties:
          title: ~
          author: {range: Person}

``GeneratorConfig.from_dict`` validates the mapping eagerly so a bad file
fails before any vocabulary is read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import ConfigError
from .ontology.graph import SCHEMA_ORG_NAMESPACE

FIELD_VISIBILITIES = ("public", "protected", "private")

DEFAULT_NAMESPACES = {
    "entity": "schema_org.entity",
    "enum": "schema_org.enum",
    "interface": "schema_org.model",
}

DEFAULT_ANNOTATION_GENERATORS = ("doc", "validation", "orm")

_TOP_LEVEL_KEYS = {
    "types": "types",
    "namespaces": "namespaces",
    "useRte": "use_rte",
    "checkIsGoodRelations": "check_is_good_relations",
    "fieldVisibility": "field_visibility",
    "header": "header",
    "output": "output",
    "annotationGenerators": "annotation_generators",
    "vocabularyNamespace": "vocabulary_namespace",
}


def _mapping(value: Any, where: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be a mapping, got {type(value).__name__}")
    return value


def _optional_str(value: Any, where: str) -> Optional[str]:
    if value is None or value is False or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{where} must be a string, got {type(value).__name__}")
    return value


def _bool(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{where} must be a boolean, got {type(value).__name__}")
    return value


@dataclass
class PropertyConfig:
    """Per-property options (only a range override today)."""

    range: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'PropertyConfig':
        data = _mapping(data, where)
        unknown = set(data) - {"range"}
        if unknown:
            raise ConfigError(f"Unknown keys in {where}: {', '.join(sorted(unknown))}")
        return cls(range=_optional_str(data.get("range"), f"{where}.range"))


@dataclass
class TypeConfig:
    """Per-type options.

    Attributes:
        properties: Property allow-list; empty means "all properties"
        parent: Explicit parent class name
        class_namespace: Namespace override for the class (or enum)
        interface_namespace: Namespace override for the interface
    """

    properties: dict[str, PropertyConfig] = field(default_factory=dict)
    parent: Optional[str] = None
    class_namespace: Optional[str] = None
    interface_namespace: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'TypeConfig':
        data = _mapping(data, where)
        unknown = set(data) - {"properties", "parent", "namespaces"}
        if unknown:
            raise ConfigError(f"Unknown keys in {where}: {', '.join(sorted(unknown))}")

        properties = {
            str(name): PropertyConfig.from_dict(value, f"{where}.properties.{name}")
            for name, value in _mapping(data.get("properties"), f"{where}.properties").items()
        }
        namespaces = _mapping(data.get("namespaces"), f"{where}.namespaces")
        unknown = set(namespaces) - {"class", "interface"}
        if unknown:
            raise ConfigError(f"Unknown keys in {where}.namespaces: {', '.join(sorted(unknown))}")

        return cls(
            properties=properties,
            parent=_optional_str(data.get("parent"), f"{where}.parent"),
            class_namespace=_optional_str(namespaces.get("class"), f"{where}.namespaces.class"),
            interface_namespace=_optional_str(namespaces.get("interface"), f"{where}.namespaces.interface"),
        )


@dataclass
class GeneratorConfig:
    """Options of a single generation run."""

    types: dict[str, TypeConfig] = field(default_factory=dict)
    namespaces: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_NAMESPACES))
    use_rte: bool = False
    check_is_good_relations: bool = False
    field_visibility: str = "private"
    header: Optional[str] = None
    output: Path = Path("out")
    annotation_generators: list[str] = field(default_factory=lambda: list(DEFAULT_ANNOTATION_GENERATORS))
    vocabulary_namespace: str = SCHEMA_ORG_NAMESPACE

    @property
    def types_defined(self) -> bool:
        """Is an explicit type allow-list active?"""
        return bool(self.types)

    def type_config(self, name: str) -> Optional[TypeConfig]:
        return self.types.get(name)

    def properties_for(self, type_name: str) -> dict[str, PropertyConfig]:
        """Property allow-list of a type (empty when not restricted)."""
        type_config = self.types.get(type_name)
        return type_config.properties if type_config else {}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'GeneratorConfig':
        """Build and validate a configuration from a parsed YAML mapping.

        Raises:
            ConfigError: On unknown keys, wrong value types or unknown
                annotation generators
        """
        from .annotation.registry import validate_annotation_generators

        data = _mapping(data, "configuration")
        unknown = set(data) - set(_TOP_LEVEL_KEYS)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        config = cls()

        config.types = {
            str(name): TypeConfig.from_dict(value, f"types.{name}")
            for name, value in _mapping(data.get("types"), "types").items()
        }

        namespaces = _mapping(data.get("namespaces"), "namespaces")
        unknown = set(namespaces) - set(DEFAULT_NAMESPACES)
        if unknown:
            raise ConfigError(f"Unknown keys in namespaces: {', '.join(sorted(unknown))}")
        for key, value in namespaces.items():
            namespace = _optional_str(value, f"namespaces.{key}")
            if namespace:
                config.namespaces[key] = namespace

        if "useRte" in data:
            config.use_rte = _bool(data["useRte"], "useRte")
        if "checkIsGoodRelations" in data:
            config.check_is_good_relations = _bool(data["checkIsGoodRelations"], "checkIsGoodRelations")

        if "fieldVisibility" in data:
            visibility = data["fieldVisibility"]
            if visibility not in FIELD_VISIBILITIES:
                raise ConfigError(
                    f"fieldVisibility must be one of {', '.join(FIELD_VISIBILITIES)}, got {visibility!r}"
                )
            config.field_visibility = visibility

        config.header = _optional_str(data.get("header"), "header")

        output = _optional_str(data.get("output"), "output")
        if output:
            config.output = Path(output)

        if "annotationGenerators" in data:
            generators = data["annotationGenerators"] or []
            if not isinstance(generators, list) or not all(isinstance(g, str) for g in generators):
                raise ConfigError("annotationGenerators must be a list of generator names")
            config.annotation_generators = list(generators)

        vocabulary_namespace = _optional_str(data.get("vocabularyNamespace"), "vocabularyNamespace")
        if vocabulary_namespace:
            config.vocabulary_namespace = vocabulary_namespace

        try:
            validate_annotation_generators(config.annotation_generators)
        except KeyError as e:
            raise ConfigError(str(e)) from e

        return config


def load_config(path: Union[str, Path, None]) -> GeneratorConfig:
    """Load a YAML configuration file (defaults when ``path`` is None).

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the YAML is invalid or fails validation
    """
    if path is None:
        return GeneratorConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return GeneratorConfig.from_dict(data)

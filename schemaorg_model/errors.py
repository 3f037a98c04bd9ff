"""Exceptions raised by schemaorg-model.

Diagnostics below "fatal" are logged, not raised. Only conditions that make
a run meaningless (bad configuration, unknown extensions) are exceptions.
"""


class SchemaOrgModelError(Exception):
    """Base class for fatal generator errors."""


class ConfigError(SchemaOrgModelError, ValueError):
    """Raised when a run configuration is malformed."""


class UnknownAnnotationGeneratorError(SchemaOrgModelError, KeyError):
    """Raised when an annotation generator identifier is not registered."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(name)

    def __str__(self) -> str:
        return (
            f"Unknown annotation generator {self.name!r}. "
            f"Registered generators: {', '.join(self.known) or 'none'}"
        )

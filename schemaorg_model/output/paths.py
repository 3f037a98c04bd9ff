"""Mapping from dotted namespaces to output directories."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class OutputPathResolver:
    """Resolves namespaces under a base output directory.

    ``app.entity`` under ``out`` becomes ``out/app/entity``.
    """

    def __init__(self, output: Union[str, Path]):
        self.output = Path(output)

    def directory(self, namespace: str) -> Path:
        return self.output.joinpath(*namespace.split("."))

    def module_path(self, namespace: str, name: str) -> Path:
        return self.directory(namespace) / f"{name}.py"

    def ensure_dir(self, namespace: str) -> Path:
        """Create the namespace directory if needed and return it."""
        directory = self.directory(namespace)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

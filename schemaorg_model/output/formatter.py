"""Formatter chain run over the files written by a generation run."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


class FormatterChain:
    """Code formatter chain.

    Normalizes generated modules with:
    - ruff format
    - ruff check --fix (optional)

    A missing ruff executable is reported once and formatting is skipped.

    Args:
        enable_ruff_format: Run ``ruff format``
        enable_ruff_check: Run ``ruff check --fix``
        timeout: Seconds allowed per ruff invocation
    """

    def __init__(
        self,
        enable_ruff_format: bool = True,
        enable_ruff_check: bool = False,
        timeout: int = 60,
    ):
        self.enable_ruff_format = enable_ruff_format
        self.enable_ruff_check = enable_ruff_check
        self.timeout = timeout

    def format_files(self, files: Iterable[Path]) -> bool:
        """Format exactly the given files.

        Returns:
            True if every enabled step succeeded (or ruff is unavailable)
        """
        paths = [str(f) for f in files if Path(f).suffix == ".py"]
        if not paths:
            logger.debug("No Python files to format")
            return True

        success = True
        if self.enable_ruff_format:
            success = self._run(["ruff", "format", *paths], ok_codes=(0,)) and success
        if self.enable_ruff_check:
            # ruff check exits 1 when it reports issues it could not fix
            success = self._run(["ruff", "check", "--fix", *paths], ok_codes=(0, 1)) and success
        return success

    def _run(self, command: list[str], ok_codes: tuple[int, ...]) -> bool:
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            logger.warning("ruff not found in PATH. Skipping format.")
            return True
        except subprocess.TimeoutExpired:
            logger.error("%s timed out after %ss", " ".join(command[:2]), self.timeout)
            return False

        if result.returncode not in ok_codes:
            logger.warning("%s failed:\n%s", " ".join(command[:2]), result.stderr)
            return False

        logger.debug("%s succeeded", " ".join(command[:2]))
        return True

"""
Prettier formatter for TypeScript code.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ...errors import ExternalToolError
from ..config import FormatterConfig
from .base import Formatter

logger = logging.getLogger(__name__)


class PrettierFormatter(Formatter):
    """Formatter running the prettier executable on the generated code."""

    def __init__(self, executable: str = "prettier"):
        self.executable = executable
        self._available = None

    def is_available(self) -> bool:
        """Check if prettier is installed."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [self.executable, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=30,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, OSError):
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig, output_file: Path) -> str:
        """
        Format TypeScript code using prettier.

        Prettier reads the code from stdin; the output file path tells it which
        parser to use and where to look for its configuration.

        Args:
            code: TypeScript source code to format
            config: Formatter configuration
            output_file: Path the code will be written to

        Returns:
            Formatted code

        Raises:
            ExternalToolError: If prettier is missing, its config file is missing, or it fails
        """
        if not self.is_available():
            raise ExternalToolError(f"Unable to run prettier ({self.executable!r}). Is it installed?")

        cmd = [self.executable, "--stdin-filepath", str(output_file)]

        if config.config_path is not None:
            if not config.config_path.is_file():
                raise ExternalToolError(f'prettierConfigPath does not exist: "{config.config_path}"')
            cmd.extend(["--config", str(config.config_path)])
        elif not config.resolve_config:
            cmd.append("--no-config")

        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=60,
            )
        except (subprocess.SubprocessError, OSError) as e:
            raise ExternalToolError(f"prettier failed: {e}") from e

        if result.returncode != 0:
            raise ExternalToolError(f"prettier exited with code {result.returncode}:\n{result.stderr.strip()}")

        return result.stdout

"""
Base class for code formatters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..config import FormatterConfig


class Formatter(ABC):
    """Abstract base class for code formatters."""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig, output_file: Path) -> str:
        """
        Format the given code.

        Args:
            code: The source code to format
            config: Formatter configuration
            output_file: Path the code will be written to

        Returns:
            Formatted code

        Raises:
            ExternalToolError: If the formatter cannot be run
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the formatter is available (installed and runnable).

        Returns:
            True if the formatter can be used
        """

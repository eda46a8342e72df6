"""
Atomic file writer for generated code.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written output file behind.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes.

    1. Write to a temporary file in the same directory
    2. Atomically replace the target file
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Missing parent directories are created.

        Args:
            path: Target file path
            content: Content to write (UTF-8)

        Raises:
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info("Wrote %s", path)

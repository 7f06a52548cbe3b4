"""
Output sinks for generated PDF documents.

A sink receives the finished byte buffer and a suggested filename. The
assembler checks availability before doing any work.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Tuple

from ..exceptions import SinkUnavailableError

logger = logging.getLogger(__name__)


class OutputSink:
    """
    Base class for all output sinks.
    """

    def is_available(self) -> bool:
        """Whether the sink can currently accept a document."""
        raise NotImplementedError("Subclasses must implement is_available")

    def deliver(self, filename: str, data: bytes):
        """
        Hand the document to its destination.

        Args:
            filename: Suggested filename (e.g. ``schedule-2026-10.pdf``)
            data: Complete PDF bytes
        """
        raise NotImplementedError("Subclasses must implement deliver")


class FileSink(OutputSink):
    """Writes documents into a directory on disk."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def is_available(self) -> bool:
        return self.directory.is_dir() and os.access(self.directory, os.W_OK)

    def deliver(self, filename: str, data: bytes) -> Path:
        """
        Write data to ``directory / filename``.

        Returns:
            Path of the written file

        The bytes go to a temporary file in the same directory that is then
        renamed over the target, so a failed write leaves no partial file.

        Raises:
            ValueError: If filename is not a bare file name
            SinkUnavailableError: If the file cannot be written
        """
        if not filename or Path(filename).name != filename:
            raise ValueError(f"Expected a bare file name, got {filename!r}")

        path = self.directory / filename
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(dir=self.directory, prefix=f".{filename}.",
                                             suffix=".tmp", delete=False) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            logger.error(f"IO error while writing PDF file: {e}")
            raise SinkUnavailableError("Cannot write PDF file", f"{path}: {e}") from e
        logger.info(f"Wrote {len(data):,} bytes to {path}")
        return path


class MemorySink(OutputSink):
    """Keeps delivered documents in memory (HTTP responses, tests)."""

    def __init__(self):
        self.deliveries: List[Tuple[str, bytes]] = []

    def is_available(self) -> bool:
        return True

    def deliver(self, filename: str, data: bytes) -> bytes:
        self.deliveries.append((filename, data))
        return data

    @property
    def files(self) -> Dict[str, bytes]:
        return dict(self.deliveries)

"""
Document sinks: where finished PDFs go.

The layout engine never touches a sink; only the pipeline hands a rendered
document to one. A sink either takes the whole document or raises, it never
leaves a partial file behind.
"""

import logging
import os
import re
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

_RE_UNSAFE_NAME = re.compile(r"[^A-Za-z0-9._-]+")


class DocumentSink(ABC):
    """Narrow output interface: accept(content, filename)."""

    @abstractmethod
    def accept(self, content: bytes, filename: str) -> str:
        """Deliver ``content`` under ``filename``. Returns where it went."""


def safe_filename(filename: str) -> str:
    """Strip directories and anything outside [A-Za-z0-9._-]."""
    name = _RE_UNSAFE_NAME.sub("_", os.path.basename(filename or "")).strip("._")
    return name or "document.pdf"


class DirectorySink(DocumentSink):
    """Writes each document into ``directory`` atomically."""

    def __init__(self, directory: str):
        self.directory = directory

    def accept(self, content: bytes, filename: str) -> str:
        os.makedirs(self.directory, exist_ok=True)
        target = os.path.join(self.directory, safe_filename(filename))

        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".part")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.replace(tmp_path, target)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

        logger.info(f"Wrote {len(content)} bytes to {target}")
        return target


@dataclass
class Delivery:
    filename: str
    content: bytes


class MemorySink(DocumentSink):
    """Keeps deliveries in memory, in order."""

    def __init__(self):
        self.deliveries: List[Delivery] = []

    def accept(self, content: bytes, filename: str) -> str:
        self.deliveries.append(Delivery(filename=filename, content=content))
        return filename

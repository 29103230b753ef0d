"""Configuration for reading and rendering venue files."""

import os
from dataclasses import dataclass
from typing import Optional

# Terminator appended to every rendered line (venue headers, corridor lines).
LINE_SEPARATOR = os.linesep


@dataclass(frozen=True)
class ReaderConfig:
    """Settings used when opening a venue file.

    Attributes:
        encoding: Text encoding of the input file.
        errors: Codec error handler passed to ``open``.
        newline: Newline mode passed to ``open``; ``None`` enables universal
            newlines so ``\\r\\n`` files read the same as ``\\n`` files.
    """

    encoding: str = "utf-8"
    errors: str = "strict"
    newline: Optional[str] = None

    def open_kwargs(self) -> dict:
        """Return keyword arguments for ``open`` in text mode."""
        return {
            "encoding": self.encoding,
            "errors": self.errors,
            "newline": self.newline,
        }


# Global configuration instance
READER_CONFIG = ReaderConfig()

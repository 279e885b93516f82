"""Output sinks and the common formatter base class."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Protocol


class TextSink(Protocol):
    """Anything text can be written to (``io.StringIO``, ``sys.stdout``, ...)."""

    def write(self, text: str, /) -> object: ...


class Formatter(ABC):
    """Base class for Approximint formatters.

    Subclasses emit characters into a sink piece by piece; ``str()`` collects
    the output into a string.
    """

    @abstractmethod
    def write(self, sink: TextSink) -> None:
        """Write the formatted value into sink."""
        ...

    def __str__(self) -> str:
        return render(self)


def render(formatter: Formatter) -> str:
    """Return the text formatter writes."""
    buffer = io.StringIO()
    formatter.write(buffer)
    return buffer.getvalue()

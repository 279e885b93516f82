"""Pytest configuration and fixtures."""

from dataclasses import dataclass, field

import pytest

from approximint import Approximint


@pytest.fixture
def thousand() -> Approximint:
    """Return 1,000."""
    return Approximint(1_000)


@pytest.fixture
def million(thousand: Approximint) -> Approximint:
    """Return 1,000,000 built by multiplication."""
    return thousand * thousand


@pytest.fixture
def billion(thousand: Approximint, million: Approximint) -> Approximint:
    """Return 1,000,000,000 built by multiplication."""
    return thousand * million


@pytest.fixture
def googol() -> Approximint:
    """Return 10^100."""
    return Approximint.one_e(100)


# =============================================================================
# Mock classes for sink injection
# =============================================================================


@dataclass
class RecordingSink:
    """Sink that records every write call.

    Usage:
        sink = RecordingSink()
        ScientificFormatter(value).write(sink)
        assert sink.text == "1.234e9"
        assert len(sink.writes) > 1  # characters arrive piece by piece
    """

    writes: list[str] = field(default_factory=list)

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    @property
    def text(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Return an empty RecordingSink."""
    return RecordingSink()


@dataclass
class CountingSink:
    """Sink that keeps only the start of the output and its total length.

    Used for outputs too large to hold comfortably, such as MAX in words.
    """

    head_size: int = 64
    head: str = ""
    length: int = 0
    writes: int = 0

    def write(self, text: str) -> int:
        if len(self.head) < self.head_size:
            self.head = (self.head + text)[: self.head_size]
        self.length += len(text)
        self.writes += 1
        return len(text)


@pytest.fixture
def counting_sink() -> CountingSink:
    """Return an empty CountingSink."""
    return CountingSink()

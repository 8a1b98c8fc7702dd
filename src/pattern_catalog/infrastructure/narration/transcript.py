"""
Transcript context manager for demo narration.

Pattern objects narrate what they do instead of printing. When a transcript
is active the narration is collected in order; it is always emitted to the
structured logger at DEBUG level as well.

Context-local storage keeps concurrent demo runs isolated from each other.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

_current_transcript: ContextVar[Optional["Transcript"]] = ContextVar(
    "current_transcript", default=None
)


class TranscriptEntry(BaseModel):
    """A single narrated line."""
    model_config = ConfigDict(frozen=True)

    section: Optional[str] = None
    source: str
    message: str

    def render(self) -> str:
        return f"[{self.source}] {self.message}"


class Transcript(BaseModel):
    """Ordered narration produced while a demo runs."""

    title: Optional[str] = None
    entries: List[TranscriptEntry] = Field(default_factory=list)
    sections: List[str] = Field(default_factory=list)

    def section(self, title: str) -> None:
        """Start a new named section; following entries belong to it."""
        self.sections.append(title)

    @property
    def current_section(self) -> Optional[str]:
        return self.sections[-1] if self.sections else None

    def record(self, source: str, message: str) -> TranscriptEntry:
        entry = TranscriptEntry(section=self.current_section, source=source, message=message)
        self.entries.append(entry)
        return entry

    def lines(self) -> List[str]:
        """Rendered lines in narration order."""
        return [entry.render() for entry in self.entries]

    def messages(self, source: Optional[str] = None) -> List[str]:
        """Raw messages, optionally filtered by source."""
        return [e.message for e in self.entries if source is None or e.source == source]

    def contains(self, text: str) -> bool:
        """Check whether any narrated message contains the text."""
        return any(text in entry.message for entry in self.entries)

    def by_section(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for entry in self.entries:
            grouped.setdefault(entry.section or "", []).append(entry.render())
        return grouped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "sections": list(self.sections),
            "lines": self.lines(),
        }


@contextmanager
def transcript_context(transcript: Optional[Transcript] = None) -> Iterator[Transcript]:
    """
    Context manager that makes a transcript the active narration target.

    Args:
        transcript: Transcript to collect into. A new one is created if None.

    Yields:
        The active transcript

    Example:
        with transcript_context() as transcript:
            editor.write("Hello")
        assert transcript.contains("Written")
    """
    active = transcript if transcript is not None else Transcript()
    token = _current_transcript.set(active)
    try:
        yield active
    finally:
        _current_transcript.reset(token)


def current_transcript() -> Optional[Transcript]:
    """Get the transcript bound to the current context, if any."""
    return _current_transcript.get()


def narrate(source: str, message: str) -> str:
    """
    Narrate a step of a pattern demo.

    Args:
        source: Name of the object that performed the step
        message: What happened

    Returns:
        The message, so callers can both narrate and return it
    """
    transcript = _current_transcript.get()
    if transcript is not None:
        transcript.record(source, message)
    logger.debug(message, source=source)
    return message


def section(title: str) -> None:
    """Start a section in the active transcript."""
    transcript = _current_transcript.get()
    if transcript is not None:
        transcript.section(title)
    logger.debug("section", title=title)

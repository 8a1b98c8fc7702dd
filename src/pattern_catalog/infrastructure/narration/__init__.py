"""Demo narration utilities."""

from .transcript import (
    Transcript,
    TranscriptEntry,
    current_transcript,
    narrate,
    section,
    transcript_context,
)

__all__ = [
    'Transcript',
    'TranscriptEntry',
    'current_transcript',
    'narrate',
    'section',
    'transcript_context',
]

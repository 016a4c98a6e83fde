"""Turn transcribed speech into session findings and live feedback.

The audio capture and the speech-to-text call live outside this package;
these helpers only see the resulting text.
"""

import datetime
import logging
import uuid
from typing import Callable

from somasync.models import Finding, ParsedVoiceCommand, TranscriptionState
from somasync.notes.formatting import format_duration
from somasync.transcriber.commands import format_voice_command, parse_voice_command

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Confidence scoring
# ---------------------------------------------------------------------------

_BASE_CONFIDENCE = 0.5
_MAX_TERM_BONUS_COUNT = 3


def calculate_transcription_confidence(
    text: str,
    has_command: bool,
    anatomical_term_count: int,
) -> float:
    """Heuristic 0-1 confidence for one transcribed line."""
    confidence = _BASE_CONFIDENCE

    # Longer text is generally more reliable
    if len(text) > 20:
        confidence += 0.2
    if len(text) > 50:
        confidence += 0.1

    # Commands are structured speech
    if has_command:
        confidence += 0.2

    # Anatomical terms indicate clinical context
    if anatomical_term_count > 0:
        confidence += 0.1 * min(anatomical_term_count, _MAX_TERM_BONUS_COUNT)

    return min(confidence, 1.0)


# ---------------------------------------------------------------------------
# Transcription state
# ---------------------------------------------------------------------------

def initialize_transcription_state() -> TranscriptionState:
    return TranscriptionState()


def start_transcription(state: TranscriptionState) -> TranscriptionState:
    return state.model_copy(update={"is_transcribing": True, "error": None})


def apply_transcript(state: TranscriptionState, transcript: str) -> TranscriptionState:
    """Fold a finished transcript into the state.

    The full transcript accumulates across calls; the last command and the
    command count track voice commands seen in the new text.
    """
    commands = [p for p in _parse_lines(transcript) if p.is_command]

    full = f"{state.full_transcript}\n{transcript}" if state.full_transcript else transcript
    update = {
        "is_transcribing": False,
        "current_transcript": transcript,
        "full_transcript": full,
        "command_count": state.command_count + len(commands),
    }
    if commands:
        update["last_command"] = commands[-1]
    return state.model_copy(update=update)


def fail_transcription(state: TranscriptionState, message: str) -> TranscriptionState:
    logger.warning("Transcription failed: %s", message)
    return state.model_copy(update={"is_transcribing": False, "error": message})


# ---------------------------------------------------------------------------
# Findings
# ---------------------------------------------------------------------------

def _default_finding_id() -> str:
    return f"finding_{uuid.uuid4().hex}"


def _parse_lines(transcript: str) -> list[ParsedVoiceCommand]:
    return [parse_voice_command(line) for line in transcript.split("\n") if line.strip()]


def findings_from_transcript(
    transcript: str,
    elapsed_seconds: int,
    *,
    now: datetime.datetime | None = None,
    id_factory: Callable[[], str] | None = None,
) -> list[Finding]:
    """Build a Finding for every voice-command line in transcript.

    All findings from one transcript share the elapsed-time timestamp.
    Plain speech lines are not findings.
    """
    if elapsed_seconds < 0:
        raise ValueError(f"Elapsed time must be non-negative, got {elapsed_seconds}")
    now = now or datetime.datetime.now()
    id_factory = id_factory or _default_finding_id

    findings = []
    for parsed in _parse_lines(transcript):
        if not parsed.is_command:
            continue
        findings.append(Finding(
            id=id_factory(),
            timestamp=elapsed_seconds * 1000,
            text=format_voice_command(parsed),
            created_at=now,
        ))

    logger.info("Extracted %d findings from transcript at %ss", len(findings), elapsed_seconds)
    return findings


def mark_finding(
    elapsed_seconds: int,
    *,
    now: datetime.datetime | None = None,
    id_factory: Callable[[], str] | None = None,
) -> Finding:
    """Manual "Mark Finding" button: a placeholder finding at the current time."""
    id_factory = id_factory or _default_finding_id
    return Finding(
        id=id_factory(),
        timestamp=elapsed_seconds * 1000,
        text=f"Finding marked at {format_duration(elapsed_seconds)}",
        created_at=now or datetime.datetime.now(),
    )

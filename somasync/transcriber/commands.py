"""Spoken voice commands for clinical documentation.

A therapist flags a finding by prefixing an utterance with a command word
and a colon, e.g. "mark: left levator scapulae tension" or "rom: 90 degrees".
Anything without a recognised prefix is treated as plain speech.
"""

import logging
import re

from somasync.models import ParsedVoiceCommand

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Command pattern table
# ---------------------------------------------------------------------------
# Order matters: the first matching pattern wins.

VOICE_COMMAND_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("mark", re.compile(r'^mark:\s*(.+)$', re.IGNORECASE)),
    ("note", re.compile(r'^note:\s*(.+)$', re.IGNORECASE)),
    ("pain", re.compile(r'^pain:\s*(.+)$', re.IGNORECASE)),
    ("referral", re.compile(r'^referral:\s*(.+)$', re.IGNORECASE)),
    ("restriction", re.compile(r'^restriction:\s*(.+)$', re.IGNORECASE)),
    # Spoken as "trigger point:" or "triggerpoint:"
    ("triggerPoint", re.compile(r'^trigger\s*point:\s*(.+)$', re.IGNORECASE)),
    ("length", re.compile(r'^length:\s*(.+)$', re.IGNORECASE)),
    ("strength", re.compile(r'^strength:\s*(.+)$', re.IGNORECASE)),
    ("rom", re.compile(r'^rom:\s*(.+)$', re.IGNORECASE)),
)

COMMAND_TYPES = tuple(label for label, _ in VOICE_COMMAND_PATTERNS)

# Leading/trailing whitespace, including a byte-order mark left by some transcribers
_EDGE_SPACE = re.compile(r'^[\s\ufeff]+|[\s\ufeff]+$')

# Label used when a command carries no type
_FALLBACK_LABEL = "Note"


def parse_voice_command(text: str) -> ParsedVoiceCommand:
    """Parse one line of transcribed text into a voice command.

    Examples:
        "mark: left levator scapulae tension" -> type "mark", text "left levator scapulae tension"
        "rom: 90 degrees"                     -> type "rom", text "90 degrees"
        "This is just regular speech"         -> type None, is_command False
    """
    trimmed = _EDGE_SPACE.sub("", text)

    for label, pattern in VOICE_COMMAND_PATTERNS:
        m = pattern.match(trimmed)
        if m:
            logger.debug("Matched %s command: %r", label, trimmed)
            return ParsedVoiceCommand(type=label, text=m.group(1).strip(), is_command=True)

    return ParsedVoiceCommand(type=None, text=trimmed, is_command=False)


def format_voice_command(command: ParsedVoiceCommand) -> str:
    """Format a voice command for display, e.g. "Mark: left shoulder tension"."""
    if not command.is_command:
        return command.text

    if command.type:
        label = command.type[0].upper() + command.type[1:]
    else:
        label = _FALLBACK_LABEL
    return f"{label}: {command.text}"

"""Click CLI for SomaSync."""

import logging
import sys

import click
from pydantic import TypeAdapter, ValidationError

from somasync.config import settings
from somasync.models import Finding, SessionType

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_FINDINGS_ADAPTER = TypeAdapter(list[Finding])
_SESSION_TYPES = [t.value for t in SessionType]


@click.group()
def cli():
    """SomaSync: voice-driven SOAP notes for manual therapy sessions."""


@cli.command()
@click.argument("lines", nargs=-1, required=True)
def parse(lines):
    """Parse transcript lines as voice commands and score them."""
    from somasync.transcriber.commands import format_voice_command, parse_voice_command
    from somasync.transcriber.keyterms import extract_anatomical_terms
    from somasync.transcriber.service import calculate_transcription_confidence

    for line in lines:
        parsed = parse_voice_command(line)
        terms = extract_anatomical_terms(parsed.text)
        confidence = calculate_transcription_confidence(parsed.text, parsed.is_command, len(terms))
        kind = parsed.type if parsed.is_command else "speech"
        click.echo(f"[{kind}] {format_voice_command(parsed)}")
        click.echo(f"  terms: {', '.join(terms) if terms else '-'}")
        click.echo(f"  confidence: {confidence:.2f}")


@cli.command()
@click.argument("text")
def terms(text):
    """List anatomical terms mentioned in TEXT."""
    from somasync.transcriber.keyterms import extract_anatomical_terms

    for term in extract_anatomical_terms(text):
        click.echo(term)


@cli.command()
@click.argument("transcript", type=click.File("r"))
@click.option("--elapsed", default=0, type=click.IntRange(min=0), help="Seconds into the session")
def findings(transcript, elapsed):
    """Extract findings from a transcript file and print them as JSON."""
    from somasync.transcriber.service import findings_from_transcript

    result = findings_from_transcript(transcript.read(), elapsed)
    click.echo(_FINDINGS_ADAPTER.dump_json(result, indent=2).decode("utf-8"))


@cli.command()
@click.argument("source", type=click.File("r"))
@click.option("--session-type", type=click.Choice(_SESSION_TYPES), default=None,
              help="Session type (default from settings)")
@click.option("--client", default=None, help="Client display name (default from settings)")
@click.option("--transcript", is_flag=True, help="SOURCE is a raw transcript instead of findings JSON")
@click.option("--elapsed", default=0, type=click.IntRange(min=0), help="Seconds into the session (with --transcript)")
def note(source, session_type, client, transcript, elapsed):
    """Generate a SOAP note from findings JSON or a raw transcript."""
    from somasync.notes.soap import generate_soap_note, render_soap_note
    from somasync.transcriber.service import findings_from_transcript

    session_type = session_type or settings.default_session_type
    client = client or settings.default_client_name

    try:
        SessionType(session_type)
        if transcript:
            items = findings_from_transcript(source.read(), elapsed)
        else:
            items = _FINDINGS_ADAPTER.validate_json(source.read())
    except (ValidationError, ValueError) as e:
        click.echo(f"Invalid input: {e}", err=True)
        sys.exit(1)

    soap = generate_soap_note(items, session_type, client)
    click.echo(render_soap_note(soap))


@cli.command()
@click.argument("seconds", type=int)
def duration(seconds):
    """Format a session duration given in seconds."""
    from somasync.notes.formatting import format_duration

    try:
        click.echo(format_duration(seconds))
    except ValueError as e:
        click.echo(str(e), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()

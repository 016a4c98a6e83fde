"""Session lifecycle helpers: completion, summaries and search.

Storage is the caller's concern; these functions only build values.
"""

import datetime
import logging

from somasync.models import Session, SessionStatus, SessionSummary
from somasync.notes.soap import generate_soap_note

logger = logging.getLogger(__name__)


def complete_session(session: Session, end_time: datetime.datetime) -> Session:
    """Close a session and generate its SOAP note from the recorded findings."""
    if end_time < session.start_time:
        raise ValueError("Session cannot end before it starts")
    duration = int((end_time - session.start_time).total_seconds())
    note = generate_soap_note(list(session.findings), session.session_type, session.client_name)
    logger.info(
        "Completed session %s for %s (%ds, %d findings)",
        session.id, session.client_name, duration, len(session.findings),
    )
    return session.model_copy(update={
        "status": SessionStatus.COMPLETED,
        "end_time": end_time,
        "duration": duration,
        "soap_note": note,
    })


def summarize_session(session: Session) -> SessionSummary:
    return SessionSummary(
        id=session.id,
        client_name=session.client_name,
        session_type=session.session_type,
        date=session.start_time,
        duration=session.duration,
        findings_count=len(session.findings),
    )


def search_sessions(summaries: list[SessionSummary], query: str) -> list[SessionSummary]:
    """Filter summaries by client name (case-insensitive substring)."""
    q = query.lower()
    return [s for s in summaries if q in s.client_name.lower()]

"""Template-based SOAP note generation from session findings.

Each finding is routed to exactly one section by keyword rules, checked in
this order (first match wins):

- SUBJECTIVE: what the client reports (pain, discomfort)
- OBJECTIVE: palpation, tension, range of motion, muscles and joints
- ASSESSMENT: the therapist's interpretation (likely, suggests, pattern)
- PLAN: treatment, recommendations, referral, follow-up

Findings with no keyword default to OBJECTIVE. Empty ASSESSMENT and PLAN
sections fall back to per-session-type templates.
"""

import logging

from somasync.models import Finding, SessionType, SOAPNote

logger = logging.getLogger(__name__)

SUBJECTIVE = "subjective"
OBJECTIVE = "objective"
ASSESSMENT = "assessment"
PLAN = "plan"

SECTIONS = (SUBJECTIVE, OBJECTIVE, ASSESSMENT, PLAN)

# ---------------------------------------------------------------------------
# Keyword rules (order is significant: "referral pain" is SUBJECTIVE)
# ---------------------------------------------------------------------------

_SECTION_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (SUBJECTIVE, ("pain", "discomfort", "reports", "feels")),
    (OBJECTIVE, (
        "tension", "restriction", "trigger point", "rom", "degrees",
        "palpation", "muscle", "joint",
    )),
    (ASSESSMENT, ("likely", "suggests", "indicates", "pattern")),
    (PLAN, ("plan", "recommend", "referral", "follow-up", "treatment")),
)

_DEFAULT_SECTION = OBJECTIVE

_SESSION_TYPE_LABELS = {
    SessionType.INITIAL: "Initial Assessment",
    SessionType.FOLLOWUP: "Follow-up Session",
    SessionType.MAINTENANCE: "Maintenance Session",
}

# ---------------------------------------------------------------------------
# Fallback templates
# ---------------------------------------------------------------------------

_ASSESSMENT_PENDING = "Assessment pending - no objective findings recorded."

_ASSESSMENT_OPENERS = {
    SessionType.INITIAL: "Initial assessment reveals areas of concern that require attention. ",
    SessionType.FOLLOWUP: "Follow-up assessment shows progress from previous session. ",
    SessionType.MAINTENANCE: "Maintenance session assessment indicates ongoing management needs. ",
}

_ASSESSMENT_CLOSER = (
    "Findings suggest musculoskeletal imbalances that may benefit from "
    "targeted manual therapy techniques."
)

_DEFAULT_PLANS = {
    SessionType.INITIAL: (
        "Continue with manual therapy techniques addressing identified areas",
        "Client education on self-care and home exercises",
        "Recommend follow-up session in 1-2 weeks",
    ),
    SessionType.FOLLOWUP: (
        "Continue current treatment approach",
        "Monitor progress and adjust techniques as needed",
        "Schedule next follow-up as appropriate",
    ),
    SessionType.MAINTENANCE: (
        "Maintain current treatment schedule",
        "Continue preventive care and self-management strategies",
        "Schedule maintenance session as needed",
    ),
}


def format_session_type(session_type: SessionType | str) -> str:
    return _SESSION_TYPE_LABELS[SessionType(session_type)]


def classify_finding(text: str) -> str:
    """Return the SOAP section a finding's text belongs to."""
    lower = text.lower()
    for section, keywords in _SECTION_RULES:
        if any(kw in lower for kw in keywords):
            return section
    return _DEFAULT_SECTION


def categorize_findings(findings: list[Finding]) -> dict[str, list[Finding]]:
    """Sort findings by timestamp and split them into the four sections."""
    buckets: dict[str, list[Finding]] = {section: [] for section in SECTIONS}
    # sorted() is stable, so equal timestamps keep their input order
    for finding in sorted(findings, key=lambda f: f.timestamp):
        section = classify_finding(finding.text)
        logger.debug("Finding %s -> %s", finding.id, section)
        buckets[section].append(finding)
    return buckets


def _numbered(items: list[str] | tuple[str, ...]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, 1))


def _default_assessment(has_objective: bool, session_type: SessionType) -> str:
    if not has_objective:
        return _ASSESSMENT_PENDING
    return "Clinical Assessment:\n\n" + _ASSESSMENT_OPENERS[session_type] + _ASSESSMENT_CLOSER


def _default_plan(session_type: SessionType) -> str:
    return "Treatment Plan:\n\n" + _numbered(_DEFAULT_PLANS[session_type])


def generate_soap_note(
    findings: list[Finding],
    session_type: SessionType | str,
    client_name: str,
) -> SOAPNote:
    """Generate a SOAP note from session findings.

    Pure: the same findings, session type and client name always give the
    same note.
    """
    session_type = SessionType(session_type)
    buckets = categorize_findings(findings)
    texts = {section: [f.text for f in items] for section, items in buckets.items()}

    header = f"Client: {client_name}\nSession Type: {format_session_type(session_type)}\n\n"
    if texts[SUBJECTIVE]:
        subjective = header + _numbered(texts[SUBJECTIVE])
    else:
        subjective = header + "No subjective findings recorded."

    if texts[OBJECTIVE]:
        objective = "Objective Findings:\n\n" + _numbered(texts[OBJECTIVE])
    else:
        objective = "No objective findings recorded."

    if texts[ASSESSMENT]:
        assessment = "Clinical Assessment:\n\n" + _numbered(texts[ASSESSMENT])
    else:
        assessment = _default_assessment(bool(texts[OBJECTIVE]), session_type)

    if texts[PLAN]:
        plan = "Treatment Plan:\n\n" + _numbered(texts[PLAN])
    else:
        plan = _default_plan(session_type)

    logger.debug(
        "Generated SOAP note for %s: %s",
        client_name,
        ", ".join(f"{s}={len(texts[s])}" for s in SECTIONS),
    )
    return SOAPNote(subjective=subjective, objective=objective, assessment=assessment, plan=plan)


def render_soap_note(note: SOAPNote) -> str:
    """Render a note as plain text for export."""
    blocks = [
        ("SUBJECTIVE", note.subjective),
        ("OBJECTIVE", note.objective),
        ("ASSESSMENT", note.assessment),
        ("PLAN", note.plan),
    ]
    return "\n\n".join(f"{heading}\n{body}" for heading, body in blocks)

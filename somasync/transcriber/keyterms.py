"""Anatomical and clinical vocabulary for manual-therapy dictation."""

import logging

logger = logging.getLogger(__name__)

# Declaration order is the output order of extract_anatomical_terms.
# Some joints are listed under both muscles/regions and joints; the
# extractor deduplicates them.
MUSCLE_TERMS = [
    "levator scapulae", "trapezius", "rhomboid", "pectoralis",
    "latissimus dorsi", "deltoid", "rotator cuff", "biceps", "triceps",
    "forearm", "wrist", "hand", "finger", "thumb", "palm",
    "erector spinae", "quadratus lumborum", "psoas", "glute", "hamstring",
    "quadriceps", "calf", "tibialis", "peroneal", "soleus", "gastrocnemius",
    "adductor", "abductor", "hip", "knee", "ankle", "foot", "toe", "heel",
    "plantar fascia", "achilles", "neck", "cervical", "thoracic", "lumbar",
    "sacral", "coccyx", "sternum", "ribs", "intercostal", "jaw",
    "temporalis", "masseter", "sternocleidomastoid", "scalene",
]

JOINT_TERMS = [
    "shoulder", "elbow", "wrist", "hip", "knee", "ankle", "spine",
    "vertebra", "disc", "sacroiliac", "temporomandibular", "tmj",
    "glenohumeral", "acromioclavicular", "sternoclavicular",
]

CONDITION_TERMS = [
    "tension", "tightness", "restriction", "trigger point", "knot", "spasm",
    "weakness", "pain", "tenderness", "swelling", "inflammation",
    "stiffness", "limited range", "rom", "degrees", "referral", "radiation",
]

ANATOMICAL_TERMS: tuple[str, ...] = tuple(MUSCLE_TERMS + JOINT_TERMS + CONDITION_TERMS)


def extract_anatomical_terms(text: str) -> list[str]:
    """Return vocabulary terms contained in text, in vocabulary order, each once.

    Matching is a plain case-insensitive substring test, so short terms also
    match inside longer words ("rom" in "from").
    """
    lower = text.lower()

    seen = set()
    found = []
    for term in ANATOMICAL_TERMS:
        if term in seen:
            continue
        if term.lower() in lower:
            seen.add(term)
            found.append(term)
    if found:
        logger.debug("Extracted %d anatomical terms from %r", len(found), text)
    return found

"""Severity classification of duplicate groups.

Severity depends only on the entity kind, the match type and whether the
members agree on a contextual attribute (the category, for works). It never
looks at timestamps or ordering.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, Optional, Tuple

from atelier.models.report import EntityKind, MatchType, Severity

logger = logging.getLogger(__name__)

# (entity, match type, same context) -> (severity, reason).
# A None context applies whatever the context is.
SEVERITY_TABLE: Dict[
    Tuple[EntityKind, MatchType, Optional[bool]], Tuple[Severity, str]
] = {
    (EntityKind.ASSET, MatchType.EXACT_PATH, None): (
        Severity.ERROR,
        "same storage path — duplicate to remove",
    ),
    (EntityKind.WORK, MatchType.EXACT_SLUG, True): (
        Severity.ERROR,
        "same slug within the same category — critical duplicate",
    ),
    (EntityKind.WORK, MatchType.EXACT_SLUG, False): (
        Severity.WARNING,
        "same slug across different categories — verify",
    ),
    (EntityKind.WORK, MatchType.EXACT_NAME, True): (
        Severity.WARNING,
        "same title within the same category — possible duplicate",
    ),
    # Usually benign: different categories reuse common titles
    (EntityKind.WORK, MatchType.EXACT_NAME, False): (
        Severity.INFO,
        "same title across different categories — likely coincidental",
    ),
    (EntityKind.ARTIST, MatchType.EXACT_SLUG, None): (
        Severity.ERROR,
        "same slug — critical duplicate to fix",
    ),
    (EntityKind.ARTIST, MatchType.EXACT_NAME, None): (
        Severity.WARNING,
        "same name with a different slug — possible duplicate",
    ),
    (EntityKind.ARTIST, MatchType.NORMALIZED_NAME, None): (
        Severity.INFO,
        "similar names differing only by accents/punctuation — verify manually",
    ),
    (EntityKind.CATEGORY, MatchType.EXACT_SLUG, None): (
        Severity.ERROR,
        "same slug — critical duplicate to fix",
    ),
    (EntityKind.LABEL, MatchType.EXACT_SLUG, None): (
        Severity.ERROR,
        "same slug — critical duplicate to fix",
    ),
}

FALLBACK = (Severity.INFO, "possible duplicate — verify manually")


def classify(
    entity: EntityKind,
    match_type: MatchType,
    same_context: Optional[bool] = None,
) -> Tuple[Severity, str]:
    """Look up severity and reason for a duplicate group.

    Args:
        entity: Entity kind of the group members
        match_type: Strategy that produced the group
        same_context: Whether all members share the contextual attribute
                      (None when the entity has no such attribute)

    Returns:
        Tuple of (severity, reason)
    """
    entry = SEVERITY_TABLE.get((entity, match_type, same_context))
    if entry is None:
        entry = SEVERITY_TABLE.get((entity, match_type, None))
    if entry is None:
        logger.warning(
            f"No severity rule for {entity.value}/{match_type.value} "
            f"(same_context={same_context}), defaulting to info"
        )
        return FALLBACK
    return entry


def tally_severities(severities: Iterable[Severity]) -> Dict[Severity, int]:
    """Count findings per severity in a single pass.

    Returns:
        Dict with an entry for every severity, zero when absent
    """
    counts = Counter(severities)
    return {severity: counts.get(severity, 0) for severity in Severity}

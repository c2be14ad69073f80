"""Rule-based narrative of evidentiary gaps.

Each rule is evaluated independently; every fired message is kept, in rule
order, joined by single spaces. When nothing fires a default coverage
message is emitted, so the summary is never empty.
"""

from typing import List, Sequence

from consensus_system.config.scoring_tables import (
    NOTABLE_OPINION_WEIGHT_PERCENT,
    SMALL_EVIDENCE_BASE,
    WEAK_CONSENSUS_SCORE,
)
from consensus_system.data_management.schemas import (
    FactOpinionBreakdown,
    StudyType,
    StudyTypeCount,
)
from consensus_system.scoring.consensus import round_half_up

DEFAULT_COVERAGE_MESSAGE = (
    "The current set of sources provides moderate coverage. Replication and "
    "additional high-quality studies would improve confidence."
)
NO_META_ANALYSIS_MESSAGE = (
    "No meta-analyses were included; higher-level synthesis could strengthen conclusions."
)
WEAK_CONSENSUS_MESSAGE = (
    "The weighted consensus is below 50%, indicating limited or conflicting "
    "empirical support for the claim."
)


def build_knowledge_gaps_summary(
    source_count: int,
    distribution: Sequence[StudyTypeCount],
    breakdown: FactOpinionBreakdown,
    consensus_score: float,
) -> str:
    """Summarize what the evidence base is missing for a claim."""
    parts: List[str] = []

    if source_count < SMALL_EVIDENCE_BASE:
        parts.append(
            f"The evidence base is small ({source_count} sources), so the consensus "
            "score should be interpreted with caution."
        )

    meta_count = sum(d.count for d in distribution if d.study_type == StudyType.META_ANALYSIS)
    if meta_count == 0:
        parts.append(NO_META_ANALYSIS_MESSAGE)

    if breakdown.opinion_weight_percent > NOTABLE_OPINION_WEIGHT_PERCENT:
        percent = int(round_half_up(breakdown.opinion_weight_percent))
        parts.append(
            "A notable share of weighted evidence comes from opinion or narrative "
            f"sources ({percent}%), which may reduce certainty."
        )

    if consensus_score < WEAK_CONSENSUS_SCORE:
        parts.append(WEAK_CONSENSUS_MESSAGE)

    if not parts:
        parts.append(DEFAULT_COVERAGE_MESSAGE)

    return " ".join(parts)


__all__ = ["build_knowledge_gaps_summary", "DEFAULT_COVERAGE_MESSAGE"]

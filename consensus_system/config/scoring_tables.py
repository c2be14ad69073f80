"""Fixed scoring tables for credibility weighting and consensus assessment.

Evidence hierarchy (study-type weight, strongest first):
1. Meta-analysis: 5
2. RCT: 4
3. Cohort: 3
4. Observational: 2
5. Opinion: 1

Risk and narrative thresholds are empirically chosen constants. They are
fixed configuration, evaluated as-is and never fitted to data.
"""

from typing import Dict, FrozenSet, Tuple

from consensus_system.data_management.schemas.source_schema import StudyType

# Canonical category order for every ordered output
STUDY_TYPE_ORDER: Tuple[StudyType, ...] = tuple(StudyType)

STUDY_TYPE_WEIGHTS: Dict[StudyType, float] = {
    StudyType.META_ANALYSIS: 5.0,
    StudyType.RCT: 4.0,
    StudyType.COHORT: 3.0,
    StudyType.OBSERVATIONAL: 2.0,
    StudyType.OPINION: 1.0,
}

# Empirical designs; everything else counts as opinion weight
FACTUAL_STUDY_TYPES: FrozenSet[StudyType] = frozenset({
    StudyType.META_ANALYSIS,
    StudyType.RCT,
    StudyType.COHORT,
    StudyType.OBSERVATIONAL,
})

# Synthetic alignment curve: BASE + w / (w + HALF_SATURATION) * SPAN
ALIGNMENT_BASE = 0.5
ALIGNMENT_SPAN = 0.45
ALIGNMENT_HALF_SATURATION = 3.0

# Misinformation risk thresholds
LOW_RISK_MIN_SCORE = 65.0
LOW_RISK_MIN_SOURCES = 5
LOW_RISK_MAX_OPINION_SHARE = 0.25  # exclusive
HIGH_RISK_MAX_SCORE = 35.0
HIGH_RISK_MIN_OPINION_SHARE = 0.5  # exclusive

# Knowledge-gap narrative thresholds
SMALL_EVIDENCE_BASE = 8  # exclusive
NOTABLE_OPINION_WEIGHT_PERCENT = 30.0  # exclusive
WEAK_CONSENSUS_SCORE = 50.0  # exclusive


def validate_study_type_weights(weights: Dict[StudyType, float]) -> None:
    """
    Check a study-type weight table covers the closed category set.

    Raises:
        ValueError: If a study type is missing or a weight is not positive.
    """
    missing = [t.value for t in StudyType if t not in weights]
    if missing:
        raise ValueError(f"Study-type weight table missing: {', '.join(missing)}")
    non_positive = [t.value for t, w in weights.items() if w <= 0]
    if non_positive:
        raise ValueError(f"Study-type weights must be positive: {', '.join(non_positive)}")


validate_study_type_weights(STUDY_TYPE_WEIGHTS)
_ranked = [STUDY_TYPE_WEIGHTS[t] for t in STUDY_TYPE_ORDER]
if any(a <= b for a, b in zip(_ranked, _ranked[1:])):
    raise ValueError("STUDY_TYPE_WEIGHTS must decrease along STUDY_TYPE_ORDER")
del _ranked

"""Misinformation risk classification.

Decision order (first match wins, ranges overlap):
1. LOW if score >= 65 AND sources >= 5 AND opinion share < 0.25
2. HIGH if score <= 35 OR opinion share > 0.5
3. MEDIUM otherwise
"""

from typing import Sequence

from loguru import logger

from consensus_system.config.scoring_tables import (
    HIGH_RISK_MAX_SCORE,
    HIGH_RISK_MIN_OPINION_SHARE,
    LOW_RISK_MAX_OPINION_SHARE,
    LOW_RISK_MIN_SCORE,
    LOW_RISK_MIN_SOURCES,
)
from consensus_system.data_management.schemas import (
    MisinformationRisk,
    RawSource,
    StudyType,
)


def compute_opinion_share(sources: Sequence[RawSource]) -> float:
    """Fraction of sources categorized as Opinion (0 for no sources)."""
    opinion_count = sum(1 for s in sources if s.study_type == StudyType.OPINION)
    return opinion_count / max(1, len(sources))


class MisinformationRiskClassifier:
    """Maps (consensus score, source count, opinion share) to a risk label."""

    def __init__(
        self,
        low_min_score: float = LOW_RISK_MIN_SCORE,
        low_min_sources: int = LOW_RISK_MIN_SOURCES,
        low_max_opinion_share: float = LOW_RISK_MAX_OPINION_SHARE,
        high_max_score: float = HIGH_RISK_MAX_SCORE,
        high_min_opinion_share: float = HIGH_RISK_MIN_OPINION_SHARE,
    ):
        self.low_min_score = low_min_score
        self.low_min_sources = low_min_sources
        self.low_max_opinion_share = low_max_opinion_share
        self.high_max_score = high_max_score
        self.high_min_opinion_share = high_min_opinion_share
        self.logger = logger.bind(component="MisinformationRiskClassifier")

    def classify(
        self,
        consensus_score: float,
        source_count: int,
        opinion_share: float,
    ) -> MisinformationRisk:
        """
        Classify misinformation risk.

        Args:
            consensus_score: Score in [0, 100]
            source_count: Number of sources considered
            opinion_share: Fraction of Opinion sources, already floored by max(1, n)

        Returns:
            MisinformationRisk label
        """
        if (
            consensus_score >= self.low_min_score
            and source_count >= self.low_min_sources
            and opinion_share < self.low_max_opinion_share
        ):
            risk = MisinformationRisk.LOW
        elif consensus_score <= self.high_max_score or opinion_share > self.high_min_opinion_share:
            risk = MisinformationRisk.HIGH
        else:
            risk = MisinformationRisk.MEDIUM

        self.logger.debug(
            f"Risk classified: {risk.value}",
            consensus_score=consensus_score,
            source_count=source_count,
            opinion_share=opinion_share,
        )
        return risk


def assess_misinformation_risk(
    consensus_score: float,
    source_count: int,
    opinion_share: float,
) -> MisinformationRisk:
    """Classify with the fixed default thresholds."""
    return MisinformationRiskClassifier().classify(consensus_score, source_count, opinion_share)


__all__ = [
    "MisinformationRiskClassifier",
    "assess_misinformation_risk",
    "compute_opinion_share",
]

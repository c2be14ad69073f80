"""Consensus aggregation over weighted sources.

Each source contributes an alignment value in [0.5, 0.95). The consensus
score is the credibility-weighted mean of those alignments on a 0-100 scale,
rounded half-up to one decimal.

synthetic_alignment is a placeholder for a real support/contradiction
classifier over source text. It rises with credibility weight and saturates
below 0.95, so no single source yields certainty. It does not reflect the
semantic direction of the evidence.
"""

import math
from typing import Callable, Optional, Sequence

from loguru import logger

from consensus_system.config.scoring_tables import (
    ALIGNMENT_BASE,
    ALIGNMENT_HALF_SATURATION,
    ALIGNMENT_SPAN,
)
from consensus_system.data_management.schemas import WeightedSource

AlignmentFn = Callable[[WeightedSource], float]


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties away from zero for non-negative values (2.5 -> 3)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def synthetic_alignment(source: WeightedSource) -> float:
    """Saturating alignment proxy: 0.5 at zero weight, approaching 0.95."""
    weight = source.credibility_weight
    return ALIGNMENT_BASE + (weight / (weight + ALIGNMENT_HALF_SATURATION)) * ALIGNMENT_SPAN


class ConsensusAggregator:
    """
    Combines weighted sources into a single 0-100 consensus score.

    Usage:
        aggregator = ConsensusAggregator()
        score = aggregator.score(weighted_sources)

    Attributes:
        alignment_fn: Per-source alignment in [0, 1]
    """

    def __init__(self, alignment_fn: Optional[AlignmentFn] = None):
        self.alignment_fn = alignment_fn or synthetic_alignment
        self.logger = logger.bind(component="ConsensusAggregator")

    def alignment(self, source: WeightedSource) -> float:
        """Alignment of one source with the claim."""
        return self.alignment_fn(source)

    def score(self, sources: Sequence[WeightedSource]) -> float:
        """
        Compute the consensus score.

        Empty input and zero total weight both score 0.

        Args:
            sources: Weighted sources for one claim

        Returns:
            Score in [0, 100] with one decimal place
        """
        if not sources:
            return 0.0

        total_weight = 0.0
        weighted_sum = 0.0
        for source in sources:
            total_weight += source.credibility_weight
            weighted_sum += source.credibility_weight * self.alignment(source)

        raw = (weighted_sum / total_weight) * 100 if total_weight > 0 else 0.0
        score = min(100.0, max(0.0, round_half_up(raw, 1)))
        self.logger.debug(
            f"Consensus score: {score:.1f}",
            sources=len(sources),
            total_weight=total_weight,
        )
        return score


def compute_consensus_score(sources: Sequence[WeightedSource]) -> float:
    """Consensus score using the synthetic alignment curve."""
    return ConsensusAggregator().score(sources)


__all__ = [
    "ConsensusAggregator",
    "compute_consensus_score",
    "synthetic_alignment",
    "round_half_up",
]

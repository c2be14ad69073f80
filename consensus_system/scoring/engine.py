"""Consensus engine: raw sources in, weighted sources and outcome out.

Pure and synchronous. Weighting runs first; the aggregator, classifier,
distribution reducers and narrative all read the same weighted list.
"""

from typing import Optional, Sequence, Tuple, List

from loguru import logger

from consensus_system.data_management.schemas import (
    ConsensusOutcome,
    RawSource,
    WeightedSource,
)
from consensus_system.scoring.consensus import ConsensusAggregator
from consensus_system.scoring.distributions import (
    credibility_over_time,
    fact_opinion_breakdown,
    study_type_distribution,
)
from consensus_system.scoring.knowledge_gaps import build_knowledge_gaps_summary
from consensus_system.scoring.risk import MisinformationRiskClassifier, compute_opinion_share
from consensus_system.scoring.weighting import CredibilityWeighter


class ConsensusEngine:
    """
    Runs the full scoring pipeline for one claim's sources.

    Usage:
        engine = ConsensusEngine(current_year=2025)
        weighted, outcome = engine.evaluate(raw_sources)
    """

    def __init__(
        self,
        current_year: int,
        weighter: Optional[CredibilityWeighter] = None,
        aggregator: Optional[ConsensusAggregator] = None,
        classifier: Optional[MisinformationRiskClassifier] = None,
    ):
        """
        Initialize engine.

        Args:
            current_year: Year used for recency weighting
            weighter: Custom weighter (built from current_year if None)
            aggregator: Custom aggregator (synthetic alignment if None)
            classifier: Custom risk classifier (fixed thresholds if None)
        """
        self.current_year = current_year
        self.weighter = weighter or CredibilityWeighter(current_year)
        self.aggregator = aggregator or ConsensusAggregator()
        self.classifier = classifier or MisinformationRiskClassifier()
        self.logger = logger.bind(component="ConsensusEngine")

    def evaluate(
        self,
        raw_sources: Sequence[RawSource],
    ) -> Tuple[List[WeightedSource], ConsensusOutcome]:
        """
        Score a fully materialized source list.

        Args:
            raw_sources: Sources from the provider (may be empty)

        Returns:
            (weighted_sources, outcome) tuple

        Raises:
            InvalidStudyType: If a source carries an unknown study type
        """
        weighted = self.weighter.weight_sources(raw_sources)

        consensus_score = self.aggregator.score(weighted)
        opinion_share = compute_opinion_share(weighted)
        risk = self.classifier.classify(consensus_score, len(weighted), opinion_share)

        distribution = study_type_distribution(weighted)
        breakdown = fact_opinion_breakdown(weighted)
        summary = build_knowledge_gaps_summary(
            len(weighted), distribution, breakdown, consensus_score
        )

        outcome = ConsensusOutcome(
            consensus_score=consensus_score,
            misinformation_risk=risk,
            source_count=len(weighted),
            opinion_share=opinion_share,
            study_type_distribution=distribution,
            credibility_over_time=credibility_over_time(weighted),
            fact_opinion_breakdown=breakdown,
            knowledge_gaps_summary=summary,
        )
        self.logger.debug(
            f"Evaluated {len(weighted)} sources",
            consensus_score=consensus_score,
            risk=risk.value,
        )
        return weighted, outcome


__all__ = ["ConsensusEngine"]

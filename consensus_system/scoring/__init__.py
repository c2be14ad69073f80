"""Credibility weighting and consensus scoring.

This package is the deterministic core of claim analysis:
- CredibilityWeighter: log(citations + 1) * type weight / recency divisor
- ConsensusAggregator: weighted mean of a saturating alignment proxy, 0-100
- MisinformationRiskClassifier: Low / Medium / High from score, count, opinion share
- distributions: study-type histogram, credibility by year, fact/opinion split
- build_knowledge_gaps_summary: rule-based narrative of evidentiary gaps
- ConsensusEngine: composes all of the above
"""

from consensus_system.scoring.weighting import (
    CredibilityWeighter,
    compute_credibility_weight,
)
from consensus_system.scoring.consensus import (
    ConsensusAggregator,
    compute_consensus_score,
    synthetic_alignment,
)
from consensus_system.scoring.risk import (
    MisinformationRiskClassifier,
    assess_misinformation_risk,
    compute_opinion_share,
)
from consensus_system.scoring.distributions import (
    credibility_over_time,
    fact_opinion_breakdown,
    study_type_distribution,
)
from consensus_system.scoring.knowledge_gaps import build_knowledge_gaps_summary
from consensus_system.scoring.engine import ConsensusEngine

__all__ = [
    "CredibilityWeighter",
    "compute_credibility_weight",
    "ConsensusAggregator",
    "compute_consensus_score",
    "synthetic_alignment",
    "MisinformationRiskClassifier",
    "assess_misinformation_risk",
    "compute_opinion_share",
    "credibility_over_time",
    "fact_opinion_breakdown",
    "study_type_distribution",
    "build_knowledge_gaps_summary",
    "ConsensusEngine",
]

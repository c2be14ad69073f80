"""Schema package for sources and consensus analyses.

Primary exports:
- RawSource / WeightedSource: literature records before and after weighting
- ConsensusOutcome: aggregate scores and summaries for one claim
- AnalysisResult: one analysis as returned to the orchestrator

Usage:
    from consensus_system.data_management.schemas import RawSource, StudyType
    source = RawSource(title="...", year=2020, citation_count=12, study_type=StudyType.RCT)
"""

from consensus_system.data_management.schemas.source_schema import (
    StudyType,
    RawSource,
    WeightedSource,
)
from consensus_system.data_management.schemas.analysis_schema import (
    MisinformationRisk,
    StudyTypeCount,
    CredibilityPoint,
    FactOpinionBreakdown,
    ConsensusOutcome,
    AnalysisResult,
)

__all__ = [
    # Sources
    "StudyType",
    "RawSource",
    "WeightedSource",
    # Analysis
    "MisinformationRisk",
    "StudyTypeCount",
    "CredibilityPoint",
    "FactOpinionBreakdown",
    "ConsensusOutcome",
    "AnalysisResult",
]

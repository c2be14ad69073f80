"""Analysis schemas: the aggregate outcome of one claim analysis.

All models are frozen. They are created fresh for each analysis and never
mutated; persistence is the caller's concern (see AnalysisStore).
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from consensus_system.data_management.schemas.source_schema import (
    StudyType,
    WeightedSource,
)


class MisinformationRisk(str, Enum):
    """Coarse label summarizing evidentiary strength and source quality."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class StudyTypeCount(BaseModel):
    """Histogram bucket for one study type."""

    study_type: StudyType
    count: int = Field(..., ge=1)

    model_config = {"frozen": True}


class CredibilityPoint(BaseModel):
    """Summed credibility weight of all sources published in one year."""

    year: int
    total_weight: float = Field(..., ge=0.0)

    model_config = {"frozen": True}


class FactOpinionBreakdown(BaseModel):
    """Share of total credibility weight from empirical vs opinion sources."""

    factual_weight_percent: float = Field(..., ge=0.0, le=100.0)
    opinion_weight_percent: float = Field(..., ge=0.0, le=100.0)

    model_config = {"frozen": True}


class ConsensusOutcome(BaseModel):
    """Aggregate result of scoring one set of sources.

    source_count and opinion_share are the risk classifier inputs, kept so the
    label can be audited.
    """

    consensus_score: float = Field(..., ge=0.0, le=100.0)
    misinformation_risk: MisinformationRisk
    source_count: int = Field(..., ge=0)
    opinion_share: float = Field(..., ge=0.0, le=1.0)
    study_type_distribution: list[StudyTypeCount] = Field(default_factory=list)
    credibility_over_time: list[CredibilityPoint] = Field(default_factory=list)
    fact_opinion_breakdown: FactOpinionBreakdown
    knowledge_gaps_summary: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class AnalysisResult(BaseModel):
    """One claim analysis as handed back to the orchestrator."""

    analysis_id: str = Field(default_factory=lambda: f"analysis-{uuid.uuid4().hex[:12]}")
    claim_id: str = Field(default_factory=lambda: f"claim-{uuid.uuid4().hex[:12]}")
    claim_text: str = Field(..., min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    current_year: int = Field(..., description="Year used for recency weighting")
    sources: list[WeightedSource] = Field(default_factory=list)
    outcome: ConsensusOutcome

    model_config = {"frozen": True}

    def to_api_dict(self) -> dict[str, Any]:
        """Render the flat camelCase payload consumed by the dashboard."""
        outcome = self.outcome
        return {
            "id": self.analysis_id,
            "claimId": self.claim_id,
            "claimText": self.claim_text,
            "misinformationRisk": outcome.misinformation_risk.value,
            "consensusScore": outcome.consensus_score,
            "createdAt": self.created_at.isoformat(),
            "sources": [
                {
                    "claimId": self.claim_id,
                    "title": s.title,
                    "year": s.year,
                    "citationCount": s.citation_count,
                    "studyType": s.study_type.value,
                    "credibilityWeight": s.credibility_weight,
                }
                for s in self.sources
            ],
            "studyTypeDistribution": [
                {"studyType": d.study_type.value, "count": d.count}
                for d in outcome.study_type_distribution
            ],
            "credibilityOverTime": [
                {"year": p.year, "totalWeight": p.total_weight}
                for p in outcome.credibility_over_time
            ],
            "knowledgeGapsSummary": outcome.knowledge_gaps_summary,
            "factOpinionBreakdown": {
                "factualWeightPercent": outcome.fact_opinion_breakdown.factual_weight_percent,
                "opinionWeightPercent": outcome.fact_opinion_breakdown.opinion_weight_percent,
            },
        }

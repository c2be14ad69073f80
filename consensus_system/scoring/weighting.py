"""Credibility weighting for literature sources.

Formula: weight = log(citation_count + 1) * type_weight / (current_year - year + 1)

- log(citations + 1) damps highly cited outliers and is 0 at zero citations
- type_weight encodes the evidence hierarchy (Meta-analysis 5 ... Opinion 1)
- the recency divisor is floored at 1, so future-dated records weigh as if
  published this year

The current year is injected at construction, never read from the clock here.
"""

import math
from typing import Dict, Iterable, List, Optional, Union

from loguru import logger

from consensus_system.config.scoring_tables import (
    STUDY_TYPE_WEIGHTS,
    validate_study_type_weights,
)
from consensus_system.data_management.schemas import (
    RawSource,
    StudyType,
    WeightedSource,
)


class CredibilityWeighter:
    """
    Assigns each raw source a scalar credibility weight.

    Usage:
        weighter = CredibilityWeighter(current_year=2025)
        weighted = weighter.weight_sources(raw_sources)

    Attributes:
        current_year: Calendar year used for the recency divisor
        study_type_weights: Mapping of every StudyType to its weight
    """

    def __init__(
        self,
        current_year: int,
        study_type_weights: Optional[Dict[StudyType, float]] = None,
    ):
        """
        Initialize weighter.

        Args:
            current_year: Calendar year used for the recency divisor
            study_type_weights: Custom weight table (uses defaults if None)

        Raises:
            ValueError: If the custom table does not cover every study type
        """
        weights = study_type_weights if study_type_weights is not None else STUDY_TYPE_WEIGHTS
        validate_study_type_weights(weights)
        self.current_year = current_year
        self.study_type_weights = dict(weights)
        self.logger = logger.bind(component="CredibilityWeighter")

    def study_type_weight(self, study_type: Union[StudyType, str]) -> float:
        """Look up the evidence-hierarchy weight of a study type.

        Raises:
            InvalidStudyType: If study_type is outside the closed set.
        """
        return self.study_type_weights[StudyType.from_label(study_type)]

    def recency_divisor(self, year: int) -> int:
        """Years since publication plus one, never below 1."""
        return max(1, self.current_year - year + 1)

    def compute_weight(
        self,
        citation_count: int,
        year: int,
        study_type: Union[StudyType, str],
    ) -> float:
        """
        Compute the credibility weight of one source.

        Args:
            citation_count: Times cited (>= 0)
            year: Publication year
            study_type: Study-design category

        Returns:
            Non-negative credibility weight
        """
        type_weight = self.study_type_weight(study_type)
        log_citations = math.log(citation_count + 1)
        return log_citations * type_weight / self.recency_divisor(year)

    def weight_source(self, source: RawSource) -> WeightedSource:
        """Return a WeightedSource for a raw record."""
        weight = self.compute_weight(source.citation_count, source.year, source.study_type)
        return WeightedSource.from_raw(source, weight)

    def weight_sources(self, sources: Iterable[RawSource]) -> List[WeightedSource]:
        """Weight every source, preserving input order."""
        weighted = [self.weight_source(s) for s in sources]
        self.logger.debug(
            f"Weighted {len(weighted)} sources",
            current_year=self.current_year,
            total_weight=sum(s.credibility_weight for s in weighted),
        )
        return weighted


def compute_credibility_weight(
    citation_count: int,
    year: int,
    study_type: Union[StudyType, str],
    current_year: int,
) -> float:
    """Functional form of CredibilityWeighter.compute_weight with default weights."""
    return CredibilityWeighter(current_year).compute_weight(citation_count, year, study_type)


__all__ = ["CredibilityWeighter", "compute_credibility_weight"]

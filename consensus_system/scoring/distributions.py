"""Read-only distribution views over a weighted source set."""

from collections import Counter, defaultdict
from typing import Dict, List, Sequence

from consensus_system.config.scoring_tables import FACTUAL_STUDY_TYPES, STUDY_TYPE_ORDER
from consensus_system.data_management.schemas import (
    CredibilityPoint,
    FactOpinionBreakdown,
    RawSource,
    StudyTypeCount,
    WeightedSource,
)


def study_type_distribution(sources: Sequence[RawSource]) -> List[StudyTypeCount]:
    """Count sources per study type, non-zero buckets only, in canonical order."""
    counts = Counter(s.study_type for s in sources)
    return [
        StudyTypeCount(study_type=study_type, count=counts[study_type])
        for study_type in STUDY_TYPE_ORDER
        if counts[study_type] > 0
    ]


def credibility_over_time(sources: Sequence[WeightedSource]) -> List[CredibilityPoint]:
    """Sum credibility weight per publication year, ascending by year."""
    by_year: Dict[int, float] = defaultdict(float)
    for source in sources:
        by_year[source.year] += source.credibility_weight
    return [
        CredibilityPoint(year=year, total_weight=total)
        for year, total in sorted(by_year.items())
    ]


def fact_opinion_breakdown(sources: Sequence[WeightedSource]) -> FactOpinionBreakdown:
    """
    Split total credibility weight into factual vs opinion percentages.

    With no weight at all (no sources, or every weight 0) the split is 50/50.
    """
    factual = 0.0
    opinion = 0.0
    for source in sources:
        if source.study_type in FACTUAL_STUDY_TYPES:
            factual += source.credibility_weight
        else:
            opinion += source.credibility_weight

    total = factual + opinion
    if total == 0:
        return FactOpinionBreakdown(factual_weight_percent=50.0, opinion_weight_percent=50.0)
    return FactOpinionBreakdown(
        factual_weight_percent=factual / total * 100,
        opinion_weight_percent=opinion / total * 100,
    )


__all__ = ["study_type_distribution", "credibility_over_time", "fact_opinion_breakdown"]

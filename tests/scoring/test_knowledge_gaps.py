"""Tests for the knowledge-gaps narrative."""

from consensus_system.data_management.schemas import (
    FactOpinionBreakdown,
    StudyType,
    StudyTypeCount,
)
from consensus_system.scoring.knowledge_gaps import (
    DEFAULT_COVERAGE_MESSAGE,
    build_knowledge_gaps_summary,
)

SMALL = (
    "The evidence base is small (3 sources), so the consensus score should be "
    "interpreted with caution."
)
NO_META = "No meta-analyses were included; higher-level synthesis could strengthen conclusions."
WEAK = (
    "The weighted consensus is below 50%, indicating limited or conflicting "
    "empirical support for the claim."
)

WITH_META = [StudyTypeCount(study_type=StudyType.META_ANALYSIS, count=2)]
NO_META_DIST = [StudyTypeCount(study_type=StudyType.RCT, count=9)]


def _breakdown(opinion: float) -> FactOpinionBreakdown:
    return FactOpinionBreakdown(
        factual_weight_percent=100 - opinion,
        opinion_weight_percent=opinion,
    )


class TestKnowledgeGapsSummary:

    def test_default_when_nothing_fires(self):
        summary = build_knowledge_gaps_summary(10, WITH_META, _breakdown(10.0), 70.0)
        assert summary == DEFAULT_COVERAGE_MESSAGE

    def test_small_evidence_base_includes_count(self):
        summary = build_knowledge_gaps_summary(3, WITH_META, _breakdown(0.0), 80.0)
        assert summary == SMALL

    def test_eight_sources_is_not_small(self):
        summary = build_knowledge_gaps_summary(8, WITH_META, _breakdown(0.0), 80.0)
        assert "evidence base is small" not in summary

    def test_missing_meta_analysis(self):
        summary = build_knowledge_gaps_summary(12, NO_META_DIST, _breakdown(0.0), 80.0)
        assert summary == NO_META

    def test_opinion_share_rounded(self):
        summary = build_knowledge_gaps_summary(12, WITH_META, _breakdown(30.5), 80.0)
        assert "(31%)" in summary
        assert summary.startswith("A notable share of weighted evidence")

    def test_opinion_threshold_exclusive(self):
        summary = build_knowledge_gaps_summary(12, WITH_META, _breakdown(30.0), 80.0)
        assert summary == DEFAULT_COVERAGE_MESSAGE

    def test_weak_consensus(self):
        summary = build_knowledge_gaps_summary(12, WITH_META, _breakdown(0.0), 49.9)
        assert summary == WEAK

    def test_all_rules_fire_in_order(self):
        summary = build_knowledge_gaps_summary(3, [], _breakdown(60.0), 10.0)
        opinion = (
            "A notable share of weighted evidence comes from opinion or narrative "
            "sources (60%), which may reduce certainty."
        )
        assert summary == " ".join([SMALL, NO_META, opinion, WEAK])

    def test_never_empty(self):
        assert build_knowledge_gaps_summary(100, WITH_META, _breakdown(0.0), 100.0)

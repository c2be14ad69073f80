"""End-to-end scenarios for ConsensusEngine."""

import math

import pytest

from consensus_system.data_management.schemas import (
    MisinformationRisk,
    RawSource,
    StudyType,
)
from consensus_system.exceptions import InvalidStudyType
from consensus_system.scoring.engine import ConsensusEngine
from consensus_system.scoring.knowledge_gaps import DEFAULT_COVERAGE_MESSAGE

CURRENT_YEAR = 2025


@pytest.fixture
def engine() -> ConsensusEngine:
    return ConsensusEngine(current_year=CURRENT_YEAR)


def _raw(study_type: StudyType, year: int = CURRENT_YEAR, citations: int = 0) -> RawSource:
    return RawSource(
        title=f"{study_type.value} study",
        year=year,
        citation_count=citations,
        study_type=study_type,
    )


class TestScenarios:

    def test_all_uncited_opinion_is_high_risk(self, engine):
        weighted, outcome = engine.evaluate([_raw(StudyType.OPINION)] * 10)
        assert all(s.credibility_weight == 0 for s in weighted)
        assert outcome.consensus_score == 0.0
        assert outcome.opinion_share == 1.0
        assert outcome.misinformation_risk == MisinformationRisk.HIGH

    def test_highly_cited_meta_analyses_are_low_risk(self, engine):
        weighted, outcome = engine.evaluate(
            [_raw(StudyType.META_ANALYSIS, citations=1000)] * 6
        )
        assert weighted[0].credibility_weight == pytest.approx(math.log(1001) * 5)
        assert outcome.consensus_score >= 65
        assert outcome.source_count == 6
        assert outcome.opinion_share == 0
        assert outcome.misinformation_risk == MisinformationRisk.LOW
        assert outcome.fact_opinion_breakdown.factual_weight_percent == 100
        assert "evidence base is small (6 sources)" in outcome.knowledge_gaps_summary

    def test_empty_sources(self, engine):
        weighted, outcome = engine.evaluate([])
        assert weighted == []
        assert outcome.consensus_score == 0
        assert outcome.misinformation_risk in (MisinformationRisk.MEDIUM, MisinformationRisk.HIGH)
        assert outcome.fact_opinion_breakdown.factual_weight_percent == 50
        assert outcome.fact_opinion_breakdown.opinion_weight_percent == 50
        assert "evidence base is small (0 sources)" in outcome.knowledge_gaps_summary
        assert outcome.study_type_distribution == []
        assert outcome.credibility_over_time == []

    def test_one_of_each_type(self, engine):
        years = [2021, 2016, 2024, 2018, 2019]
        raws = [
            _raw(study_type, year=year, citations=100)
            for study_type, year in zip(reversed(list(StudyType)), years)
        ]
        _, outcome = engine.evaluate(raws)

        assert [(d.study_type, d.count) for d in outcome.study_type_distribution] == [
            (t, 1) for t in StudyType
        ]
        assert [p.year for p in outcome.credibility_over_time] == sorted(years)
        assert len(outcome.credibility_over_time) <= 5


class TestEngineProperties:

    def test_over_time_matches_total_weight(self, engine):
        raws = [
            _raw(StudyType.RCT, 2020, 40),
            _raw(StudyType.RCT, 2020, 12),
            _raw(StudyType.COHORT, 2015, 300),
            _raw(StudyType.OPINION, 2023, 5),
        ]
        weighted, outcome = engine.evaluate(raws)
        assert sum(p.total_weight for p in outcome.credibility_over_time) == pytest.approx(
            sum(s.credibility_weight for s in weighted)
        )

    def test_default_coverage_message(self, engine):
        raws = [_raw(StudyType.META_ANALYSIS, citations=500)] * 4 + [
            _raw(StudyType.RCT, citations=500)
        ] * 4
        _, outcome = engine.evaluate(raws)
        assert outcome.knowledge_gaps_summary == DEFAULT_COVERAGE_MESSAGE

    def test_deterministic(self, engine):
        raws = [_raw(StudyType.COHORT, 2019, 77), _raw(StudyType.OPINION, 2022, 3)]
        assert engine.evaluate(raws) == engine.evaluate(raws)

    def test_invalid_study_type_fails_fast(self):
        with pytest.raises(InvalidStudyType):
            ConsensusEngine(CURRENT_YEAR).evaluate(
                [RawSource(title="x", year=2020, citation_count=1, study_type="Preprint")]
            )


class TestRescoring:

    def test_evaluate_accepts_weighted_sources(self):
        raws = [
            _raw(StudyType.META_ANALYSIS, 2020, 250),
            _raw(StudyType.OPINION, 2018, 4),
        ]
        weighted, _ = ConsensusEngine(2020).evaluate(raws)

        rescored, outcome = ConsensusEngine(2029).evaluate(weighted)
        expected, expected_outcome = ConsensusEngine(2029).evaluate(raws)

        assert rescored == expected
        assert outcome == expected_outcome
        assert rescored[0].credibility_weight < weighted[0].credibility_weight

"""Tests for MisinformationRiskClassifier."""

import pytest

from consensus_system.data_management.schemas import MisinformationRisk, RawSource, StudyType
from consensus_system.scoring.risk import (
    MisinformationRiskClassifier,
    assess_misinformation_risk,
    compute_opinion_share,
)


@pytest.fixture
def classifier() -> MisinformationRiskClassifier:
    return MisinformationRiskClassifier()


class TestClassify:
    """Decision order: Low first, then High, else Medium."""

    def test_low(self, classifier):
        assert classifier.classify(65.0, 5, 0.24) == MisinformationRisk.LOW

    def test_low_requires_five_sources(self, classifier):
        assert classifier.classify(90.0, 4, 0.0) == MisinformationRisk.MEDIUM

    def test_low_requires_opinion_share_below_quarter(self, classifier):
        assert classifier.classify(90.0, 10, 0.25) == MisinformationRisk.MEDIUM

    def test_low_requires_score_65(self, classifier):
        assert classifier.classify(64.9, 10, 0.0) == MisinformationRisk.MEDIUM

    def test_high_on_low_score(self, classifier):
        assert classifier.classify(35.0, 10, 0.0) == MisinformationRisk.HIGH

    def test_high_on_opinion_majority(self, classifier):
        assert classifier.classify(80.0, 10, 0.51) == MisinformationRisk.HIGH

    def test_opinion_share_half_is_not_high(self, classifier):
        assert classifier.classify(50.0, 10, 0.5) == MisinformationRisk.MEDIUM

    def test_empty_input_never_low(self, classifier):
        assert classifier.classify(0, 0, 0) != MisinformationRisk.LOW
        assert classifier.classify(0, 0, 0) == MisinformationRisk.HIGH

    def test_custom_thresholds(self):
        lenient = MisinformationRiskClassifier(low_min_score=50.0, low_min_sources=1)
        assert lenient.classify(55.0, 2, 0.0) == MisinformationRisk.LOW

    def test_functional_form(self):
        assert assess_misinformation_risk(70.0, 8, 0.1) == MisinformationRisk.LOW


class TestOpinionShare:

    def _source(self, study_type: StudyType) -> RawSource:
        return RawSource(title="S", year=2020, citation_count=1, study_type=study_type)

    def test_empty_is_zero(self):
        assert compute_opinion_share([]) == 0.0

    def test_fraction(self):
        sources = [self._source(StudyType.OPINION)] + [self._source(StudyType.RCT)] * 3
        assert compute_opinion_share(sources) == 0.25

    def test_all_opinion(self):
        assert compute_opinion_share([self._source(StudyType.OPINION)] * 4) == 1.0

"""Tests for ConsensusAggregator and the synthetic alignment curve."""

import pytest

from consensus_system.data_management.schemas import StudyType, WeightedSource
from consensus_system.scoring.consensus import (
    ConsensusAggregator,
    compute_consensus_score,
    round_half_up,
    synthetic_alignment,
)


def _source(weight: float, study_type: StudyType = StudyType.RCT) -> WeightedSource:
    return WeightedSource(
        title="Source",
        year=2020,
        citation_count=10,
        study_type=study_type,
        credibility_weight=weight,
    )


@pytest.fixture
def aggregator() -> ConsensusAggregator:
    return ConsensusAggregator()


class TestSyntheticAlignment:
    """Tests for the saturating alignment proxy."""

    def test_zero_weight_is_half(self):
        assert synthetic_alignment(_source(0.0)) == 0.5

    def test_half_saturation_point(self):
        assert synthetic_alignment(_source(3.0)) == pytest.approx(0.725)

    def test_bounded_below_095(self):
        for weight in (0.1, 1.0, 10.0, 1e6):
            alignment = synthetic_alignment(_source(weight))
            assert 0.5 <= alignment < 0.95

    def test_increasing_in_weight(self):
        values = [synthetic_alignment(_source(w)) for w in (0.0, 0.5, 1.0, 5.0, 50.0)]
        assert values == sorted(values)


class TestScore:
    """Tests for the weighted-mean consensus score."""

    def test_empty_is_zero(self, aggregator):
        assert aggregator.score([]) == 0

    def test_all_zero_weight_is_zero(self, aggregator):
        assert aggregator.score([_source(0.0), _source(0.0)]) == 0.0

    def test_single_source(self, aggregator):
        assert aggregator.score([_source(3.0)]) == 72.5

    def test_weighted_mean(self, aggregator):
        """Heavier sources pull the score toward their alignment."""
        sources = [_source(1.0), _source(9.0)]
        a1 = synthetic_alignment(sources[0])
        a9 = synthetic_alignment(sources[1])
        expected = round_half_up((1.0 * a1 + 9.0 * a9) / 10.0 * 100, 1)
        assert aggregator.score(sources) == expected

    def test_range_and_precision(self, aggregator):
        for weights in ([0.01], [0.2, 7.5], [1e4, 3.3, 0.0], [2.2] * 12):
            score = aggregator.score([_source(w) for w in weights])
            assert 0 <= score <= 100
            assert round(score, 1) == score

    def test_custom_alignment_clamped(self):
        aggregator = ConsensusAggregator(alignment_fn=lambda s: 2.0)
        assert aggregator.score([_source(1.0)]) == 100.0

    def test_custom_alignment_used(self):
        aggregator = ConsensusAggregator(alignment_fn=lambda s: 0.25)
        assert aggregator.alignment(_source(4.0)) == 0.25
        assert aggregator.score([_source(4.0), _source(1.0)]) == 25.0

    def test_functional_form(self):
        sources = [_source(2.0), _source(0.5)]
        assert compute_consensus_score(sources) == ConsensusAggregator().score(sources)


class TestRoundHalfUp:

    def test_ties_round_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(72.25, 1) == 72.3

    def test_below_tie(self):
        assert round_half_up(30.4) == 30

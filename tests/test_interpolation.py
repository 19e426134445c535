import math

import pytest

from bigram.interpolation import DEFAULT_WEIGHTS, InterpolationWeights


class TestInterpolationWeights:
    def test_defaults(self):
        assert DEFAULT_WEIGHTS == InterpolationWeights(bigram=0.8, unigram=0.2, floor=1e-6)

    def test_log_prob_formula(self):
        assert DEFAULT_WEIGHTS.log_prob(0.3, 0.5) == math.log2(0.3 * 0.8 + 0.5 * 0.2 + 1e-6)

    def test_floor_only(self):
        assert DEFAULT_WEIGHTS.log_prob(0.0, 0.0) == math.log2(1e-6)

    def test_custom_weights(self):
        weights = InterpolationWeights(bigram=0.5, unigram=0.5, floor=0.25)
        assert weights.combine(0.5, 0.25) == pytest.approx(0.625)

    def test_zero_argument_is_negative_infinity(self):
        weights = InterpolationWeights(bigram=1.0, unigram=0.0, floor=0.5)
        assert weights.log_prob(-0.5, 0.0) == -math.inf

    def test_negative_argument_is_nan(self):
        assert math.isnan(DEFAULT_WEIGHTS.log_prob(-10.0, 0.0))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"bigram": -0.1},
            {"unigram": -1.0},
            {"floor": 0.0},
            {"floor": -1e-6},
            {"floor": float("nan")},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            InterpolationWeights(**kwargs)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_WEIGHTS.bigram = 0.5

from shepredicts.prediction.classifier import PCOS_THRESHOLD, classify


class TestClassify:
    def test_threshold_is_positive(self) -> None:
        assert classify(60.0) is True

    def test_just_below_threshold_is_negative(self) -> None:
        assert classify(59.99) is False

    def test_zero_is_negative(self) -> None:
        assert classify(0.0) is False

    def test_maximum_is_positive(self) -> None:
        assert classify(100.0) is True

    def test_threshold_constant(self) -> None:
        assert PCOS_THRESHOLD == 60.0

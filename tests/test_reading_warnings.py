import pytest

from colorimetry import HSVColor, ReferenceState, RGBColor, WarningCode, WarningEvaluator

CALIBRATED = ReferenceState(True, RGBColor(250, 250, 250))
RGB = RGBColor(0, 0, 0)


@pytest.fixture
def evaluator():
    return WarningEvaluator()


def test_good_reading_has_no_warnings(evaluator):
    assert evaluator.evaluate(HSVColor(120, 55, 80), RGB, CALIBRATED) == ()


def test_uncalibrated_reference_flagged(evaluator):
    assert evaluator.evaluate(HSVColor(120, 55, 80), RGB, ReferenceState()) == (
        WarningCode.REFERENCE_NOT_CALIBRATED,)


@pytest.mark.parametrize("hsv, expected", [
    (HSVColor(120, 19, 80), (WarningCode.LOW_SATURATION,)),
    (HSVColor(120, 20, 80), ()),
    (HSVColor(120, 55, 29), (WarningCode.LOW_BRIGHTNESS,)),
    (HSVColor(120, 55, 30), ()),
    (HSVColor(120, 14, 96), (WarningCode.LOW_SATURATION, WarningCode.OVEREXPOSED)),
    (HSVColor(120, 14, 95), (WarningCode.LOW_SATURATION,)),
    (HSVColor(120, 15, 96), (WarningCode.LOW_SATURATION,)),
    (HSVColor(0, 0, 10), (WarningCode.LOW_SATURATION, WarningCode.LOW_BRIGHTNESS)),
])
def test_thresholds(evaluator, hsv, expected):
    assert evaluator.evaluate(hsv, RGB, CALIBRATED) == expected


def test_all_warnings_in_order(evaluator):
    evaluator = WarningEvaluator({
        'LOW_SATURATION': 20,
        'LOW_BRIGHTNESS': 99,
        'OVEREXPOSED_VALUE': 50,
        'OVEREXPOSED_SATURATION': 15,
    })
    assert evaluator.evaluate(HSVColor(0, 5, 60), RGB, ReferenceState()) == (
        WarningCode.LOW_SATURATION,
        WarningCode.LOW_BRIGHTNESS,
        WarningCode.OVEREXPOSED,
        WarningCode.REFERENCE_NOT_CALIBRATED,
    )


def test_every_code_has_a_message():
    for code in WarningCode:
        assert code.message

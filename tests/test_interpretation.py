import pytest

from colorimetry import Analyte, Interpretation, Interpreter


@pytest.fixture
def interpreter():
    return Interpreter()


@pytest.mark.parametrize("value, status", [
    (6.4, 'danger'),
    (6.49, 'danger'),
    (6.5, 'warning'),
    (6.79, 'warning'),
    (6.8, 'ok'),
    (7.0, 'ok'),
    (7.4, 'ok'),
    (7.41, 'warning'),
    (7.6, 'warning'),
    (7.61, 'danger'),
    (8.0, 'danger'),
])
def test_ph_thresholds(interpreter, value, status):
    assert interpreter.classify('ph', value).status == status


@pytest.mark.parametrize("analyte", ['nh3', 'no2', Analyte.AMMONIA, Analyte.NITRITE])
@pytest.mark.parametrize("value, status, label", [
    (0, 'ok', 'Safe'),
    (0.25, 'ok', 'Safe'),
    (0.26, 'warning', 'Caution'),
    (0.5, 'warning', 'Caution'),
    (0.75, 'warning', 'Stress'),
    (1.0, 'warning', 'Stress'),
    (1.01, 'danger', 'Danger: change water immediately'),
    (2.0, 'danger', 'Danger: change water immediately'),
])
def test_nitrogen_thresholds(interpreter, analyte, value, status, label):
    assert interpreter.classify(analyte, value) == Interpretation(status, label)


def test_ph_labels(interpreter):
    assert interpreter.classify(Analyte.PH, 7.0) == Interpretation('ok', 'Normal')
    assert interpreter.classify(Analyte.PH, 6.0).label == 'Acidic (danger)'
    assert interpreter.classify(Analyte.PH, 8.0).label == 'Alkaline (danger)'


def test_unknown_analyte(interpreter):
    assert interpreter.classify('no3', 1.0) == Interpretation('unknown', 'Unknown')

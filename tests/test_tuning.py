import pytest

from dvs_app.domain.tuning import EyeLocatorConfig, PupilFinderConfig, WhiteDotConfig


def test_defaults_without_environment(monkeypatch):
    for name in ('DVS_WHITE_DOT_THRESHOLD', 'DVS_WHITE_DOT_MIN_AREA', 'DVS_WHITE_DOT_MAX_AREA',
                 'DVS_FACE_SCALE_FACTOR', 'DVS_FACE_MIN_NEIGHBORS', 'DVS_PUPIL_HOUGH_PARAM2'):
        monkeypatch.delenv(name, raising=False)
    assert WhiteDotConfig.from_env() == WhiteDotConfig(240, 10.0, 200.0)
    assert EyeLocatorConfig.from_env() == EyeLocatorConfig()
    assert PupilFinderConfig.from_env().param2 == pytest.approx(20.0)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('DVS_WHITE_DOT_THRESHOLD', '230')
    monkeypatch.setenv('DVS_WHITE_DOT_MAX_AREA', '150.5')
    monkeypatch.setenv('DVS_FACE_MIN_NEIGHBORS', '4')
    cfg = WhiteDotConfig.from_env()
    assert cfg.threshold == 230
    assert cfg.max_area == pytest.approx(150.5)
    assert EyeLocatorConfig.from_env().face_min_neighbors == 4


def test_garbage_falls_back_to_default(monkeypatch):
    monkeypatch.setenv('DVS_WHITE_DOT_MIN_AREA', 'lots')
    assert WhiteDotConfig.from_env().min_area == pytest.approx(10.0)

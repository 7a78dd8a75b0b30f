from services.pacer.models import SegmentationPolicy
from utils.config import load_config

PACER_VARS = (
    "PACER_DEFAULT_POLICY",
    "PACER_DEFAULT_PACING_BIAS",
    "PACER_DEFAULT_CLIMB_EFFORT",
    "PACER_DEFAULT_SEGMENT_LENGTH_BIAS",
    "PACER_LOCALE",
)


def _clear_pacer_env(monkeypatch):
    for name in PACER_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_config_defaults_without_side_effects(tmp_path, monkeypatch):
    _clear_pacer_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    cfg = load_config()
    assert list(tmp_path.iterdir()) == []
    assert not hasattr(cfg, "data_dir")
    assert cfg.default_policy == SegmentationPolicy.FIXED_KILOMETER
    assert cfg.default_pacing_bias == 0
    assert cfg.locale == "fr_FR"


def test_load_config_pacing_defaults(monkeypatch):
    _clear_pacer_env(monkeypatch)
    monkeypatch.setenv("PACER_DEFAULT_POLICY", "elevation")
    monkeypatch.setenv("PACER_DEFAULT_PACING_BIAS", "80")
    monkeypatch.setenv("PACER_DEFAULT_CLIMB_EFFORT", "abc")
    monkeypatch.setenv("PACER_DEFAULT_SEGMENT_LENGTH_BIAS", "-20")
    cfg = load_config()

    assert cfg.default_policy == SegmentationPolicy.GRADE_ADAPTIVE
    assert cfg.default_pacing_bias == 50
    assert cfg.default_climb_effort == 0
    assert cfg.default_segment_length_bias == -20

    configuration = cfg.default_configuration("45:00")
    assert configuration.target_time_sec == 2700
    assert configuration.policy == SegmentationPolicy.GRADE_ADAPTIVE
    assert configuration.pacing_bias == 50


def test_load_config_unknown_policy_falls_back(monkeypatch):
    _clear_pacer_env(monkeypatch)
    monkeypatch.setenv("PACER_DEFAULT_POLICY", "furlong")
    cfg = load_config()
    assert cfg.default_policy == SegmentationPolicy.FIXED_KILOMETER

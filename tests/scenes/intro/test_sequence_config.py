"""
test_sequence_config.py
-----------------------
Validation, presets and dict loading for SequenceConfig.
"""

import dataclasses

import pytest

from src.scenes.intro.phase import Phase, PHASE_ORDER
from src.scenes.intro.sequence_config import (
    SequenceConfig,
    load_preset,
    load_presets,
)


# ===========================================================
# Defaults & Validation
# ===========================================================

class TestSequenceConfig:

    def test_default_title_layout(self):
        config = SequenceConfig()
        assert config.durations() == {
            Phase.INITIAL_HOLD: 1.0,
            Phase.REVEAL: 1.0,
            Phase.INTER_STAGE_PAUSE: 1.0,
            Phase.REVEAL_SECONDARY: 1.0,
            Phase.FINAL_HOLD: 10.0,
        }
        assert config.start_y == -96.0
        assert config.end_y == 254.0
        assert config.subtitle_y == 370.0
        assert config.easing == "back_out"

    def test_durations_follow_phase_order(self):
        assert tuple(SequenceConfig().durations()) == PHASE_ORDER

    def test_total_duration(self):
        assert SequenceConfig().total_duration == pytest.approx(14.0)

    def test_is_immutable(self):
        config = SequenceConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.black_hold = 2.0

    @pytest.mark.parametrize("field", SequenceConfig.DURATION_FIELDS)
    def test_negative_duration_rejected(self, field):
        with pytest.raises(ValueError, match=field):
            SequenceConfig(**{field: -1.0})

    @pytest.mark.parametrize("value", ["1.0", None, True, float("nan"), float("inf")])
    def test_non_numeric_or_non_finite_duration_rejected(self, value):
        with pytest.raises(ValueError):
            SequenceConfig(final_hold=value)

    def test_zero_durations_allowed(self):
        config = SequenceConfig(**{f: 0 for f in SequenceConfig.DURATION_FIELDS})
        assert config.total_duration == 0.0

    def test_unknown_easing_rejected(self):
        with pytest.raises(ValueError, match="easing"):
            SequenceConfig(easing="wobble")

    def test_with_overrides_revalidates(self):
        config = SequenceConfig().with_overrides(final_hold=2.0)
        assert config.final_hold == 2.0
        with pytest.raises(ValueError):
            config.with_overrides(drop_duration=-0.5)


# ===========================================================
# Dict & Preset Loading
# ===========================================================

class TestPresetLoading:

    def test_from_dict_ignores_unknown_keys(self):
        config = SequenceConfig.from_dict({"final_hold": 3, "colour": "red", "_notes": "x"})
        assert config.final_hold == 3
        assert config.black_hold == 1.0

    def test_from_dict_none_gives_defaults(self):
        assert SequenceConfig.from_dict(None) == SequenceConfig()

    def test_shipped_presets_are_all_valid(self):
        presets = load_presets()
        assert {"default", "rise", "quick", "instant"} <= set(presets)
        for name in presets:
            assert isinstance(load_preset(name), SequenceConfig)

    def test_shipped_default_preset_matches_defaults(self):
        assert load_preset("default") == SequenceConfig()

    def test_instant_preset_is_all_zero(self):
        assert load_preset("instant").total_duration == 0.0

    def test_unknown_preset_falls_back_to_default(self):
        assert load_preset("does-not-exist") == load_preset("default")

    def test_preset_file_from_path(self, tmp_path):
        path = tmp_path / "intro.yaml"
        path.write_text(
            "presets:\n"
            "  default:\n"
            "    final_hold: 0.5\n"
            "  slow:\n"
            "    drop_duration: 4\n"
            "    easing: linear\n",
            encoding="utf-8",
        )

        slow = load_preset("slow", filename=str(path))
        assert slow.drop_duration == 4
        assert slow.easing == "linear"
        assert load_preset("missing", filename=str(path)).final_hold == 0.5

    def test_missing_preset_file_gives_defaults(self, tmp_path):
        missing = str(tmp_path / "nope.yaml")
        assert load_presets(missing) == {}
        assert load_preset("anything", filename=missing) == SequenceConfig()

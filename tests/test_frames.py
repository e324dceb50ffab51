"""
Frame Generator Tests
=====================

Baselines, jitter ranges, clamps, and the active-stream guard.
"""

import numpy as np
import pytest

from bcd.engine.frames import (
    ModalityDescriptor,
    SensorFrame,
    count_active,
    default_modalities,
    generate_frame,
    random_frame,
)
from bcd.engine.rng import RandomSource, SequenceSource


# =============================================================================
# Descriptors
# =============================================================================

class TestModalities:

    def test_defaults(self):
        mods = default_modalities()
        assert [m.id for m in mods] == ['facial', 'voice', 'text', 'physio', 'behavior']
        assert [m.confidence for m in mods] == [86, 82, 79, 71, 84]
        assert [m.active for m in mods] == [True, True, True, False, True]

    def test_count_active_guard(self):
        mods = default_modalities()
        assert count_active(mods) == 4
        for m in mods:
            m.active = False
        assert count_active(mods) == 1
        assert count_active([]) == 1

    def test_dict_roundtrip(self):
        m = ModalityDescriptor('voice', 'Voice', 'Pitch', False, 55.5)
        assert ModalityDescriptor.from_dict(m.to_dict()) == m


# =============================================================================
# Generation
# =============================================================================

class TestGenerateFrame:

    def test_midpoint_draws_give_baselines(self, modalities):
        frame = generate_frame(modalities, SequenceSource([0.5]))
        assert frame.active_modalities == 4
        assert frame.facial.micro_tension == pytest.approx(55 + 86 * 0.2)
        assert frame.facial.eye_aspect == 60
        assert frame.voice.pitch_var == 30
        assert frame.voice.energy == 55
        assert frame.text.sentiment == 60
        assert frame.text.hedging == 35
        assert frame.text.assertiveness == 55
        assert frame.physio.hrv == 68
        assert frame.physio.eda == 40
        assert frame.physio.respiration == 14
        assert frame.behavior.cursor_entropy == 40
        assert frame.behavior.gaze_stability == 65
        assert frame.behavior.keystroke_latency == 45

    def test_low_draws_give_lower_edges(self, modalities):
        frame = generate_frame(modalities, SequenceSource([0.0]))
        assert frame.facial.micro_tension == pytest.approx(55 - 12.5 + 86 * 0.2)
        assert frame.voice.pitch_var == pytest.approx(12.5)
        assert frame.physio.hrv == pytest.approx(55.5)
        # EDA: base 40 - 15, then - 10
        assert frame.physio.eda == pytest.approx(15.0)
        assert frame.physio.respiration == pytest.approx(11.0)

    def test_draw_order(self, modalities):
        # first draw is the EDA base, second is facial micro tension
        draws = [0.5] * 14
        draws[0] = 0.0
        frame = generate_frame(modalities, SequenceSource(draws))
        assert frame.physio.eda == pytest.approx(25.0)
        assert frame.facial.micro_tension == pytest.approx(55 + 86 * 0.2)

    def test_facial_confidence_default(self):
        frame = generate_frame([ModalityDescriptor('voice', active=True, confidence=90)], SequenceSource([0.5]))
        assert frame.facial.micro_tension == pytest.approx(55 + 60 * 0.2)

    def test_inactive_facial_still_uses_confidence(self, modalities):
        modalities[0].active = False
        frame = generate_frame(modalities, SequenceSource([0.5]))
        assert frame.facial.micro_tension == pytest.approx(55 + 86 * 0.2)
        assert frame.active_modalities == 3

    def test_no_active_modalities_counts_one(self, modalities):
        for m in modalities:
            m.active = False
        assert generate_frame(modalities, RandomSource(3)).active_modalities == 1

    def test_bounds_hold(self, modalities):
        rng = RandomSource(5)
        for _ in range(2000):
            f = generate_frame(modalities, rng)
            assert 5 <= f.voice.pitch_var <= 95
            assert 30 <= f.physio.hrv <= 95
            assert 5 <= f.physio.eda <= 95
            assert 6 <= f.physio.respiration <= 24
            for value in (f.facial.micro_tension, f.facial.eye_aspect, f.voice.energy,
                          f.text.sentiment, f.text.hedging, f.text.assertiveness,
                          f.behavior.cursor_entropy, f.behavior.gaze_stability,
                          f.behavior.keystroke_latency):
                assert 0 <= value <= 100

    def test_deterministic_per_seed(self, modalities):
        rng_a, rng_b = RandomSource(9), RandomSource(9)
        a = [generate_frame(modalities, rng_a) for _ in range(5)]
        b = [generate_frame(modalities, rng_b) for _ in range(5)]
        assert a == b


class TestRandomFrame:

    def test_readings_within_range(self):
        rng = np.random.default_rng(5)
        seen_active = set()
        for _ in range(300):
            frame = random_frame(rng)
            seen_active.add(frame.active_modalities)
            for block in frame.to_dict().values():
                if isinstance(block, dict):
                    assert all(0.0 <= v < 100.0 for v in block.values())
        assert seen_active == {0, 1, 2, 3, 4, 5}

    def test_seeded_generator_repeats(self):
        a = random_frame(np.random.default_rng(9))
        b = random_frame(np.random.default_rng(9))
        assert a == b


# =============================================================================
# Wire Form
# =============================================================================

class TestSensorFrame:

    def test_wire_keys(self, neutral_frame):
        d = neutral_frame.to_dict()
        assert d['activeModalities'] == 5
        assert set(d['facial']) == {'microTension', 'eyeAspect'}
        assert set(d['behavior']) == {'cursorEntropy', 'gazeStability', 'keystrokeLatency'}

    def test_roundtrip(self, modalities):
        frame = generate_frame(modalities, RandomSource(21))
        assert SensorFrame.from_dict(frame.to_dict()) == frame

    def test_missing_modality_raises(self, neutral_frame):
        d = neutral_frame.to_dict()
        del d['voice']
        with pytest.raises(KeyError):
            SensorFrame.from_dict(d)

    def test_frame_is_frozen(self, neutral_frame):
        with pytest.raises(AttributeError):
            neutral_frame.active_modalities = 3

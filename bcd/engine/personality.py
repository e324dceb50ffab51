"""
Personality Drift - Slow Trait Vector + Display Profiles
========================================================

Six latent traits drift slowly with the fused signal level, the reward,
and the deception cue, staying inside [0.35, 0.95]:

    p_i ← clamp(p_i + 0.05·(mean − 0.55)
                + [i = ADAPTIVITY]·0.1·reward
                − [i = AUTHENTICITY]·0.02·deceptionCue)

Two read-outs are derived from the vector: a Big-Five style display
profile (fixed linear ranges) and the behavioral fingerprint, which pairs
each trait score with a drift term from recurrent memory and the graph
signal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Sequence

import numpy as np

from .memory import MEMORY_DIM
from .numeric import js_round, lerp


class Trait(IntEnum):
    FORESIGHT = 0
    ADAPTIVITY = 1
    ASSERTIVENESS = 2
    RESTRAINT = 3
    COOPERATION = 4
    AUTHENTICITY = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


INITIAL_PERSONALITY = (0.72, 0.78, 0.63, 0.58, 0.74, 0.69)
PERSONALITY_MIN = 0.35
PERSONALITY_MAX = 0.95
MEAN_PIVOT = 0.55


@dataclass(frozen=True)
class TraitScore:
    trait: str
    score: int

    def to_dict(self) -> Dict[str, object]:
        return {'trait': self.trait, 'score': self.score}


@dataclass(frozen=True)
class FingerprintEntry:
    trait: str
    score: int
    drift: int

    def to_dict(self) -> Dict[str, object]:
        return {'trait': self.trait, 'score': self.score, 'drift': self.drift}


class PersonalityDrift:
    """Owns the trait vector."""

    def __init__(self, traits: Optional[Sequence[float]] = None):
        self.traits = np.array(traits if traits is not None else INITIAL_PERSONALITY, dtype=np.float64)
        if self.traits.shape != (len(Trait),):
            raise ValueError(f"expected {len(Trait)} traits")

    def update(self, fusion_mean: float, reward: float, deception_cue: float) -> np.ndarray:
        base = (fusion_mean - MEAN_PIVOT) * 0.05
        for trait in Trait:
            v = float(self.traits[trait]) + base
            if trait == Trait.ADAPTIVITY:
                v += reward * 0.1
            elif trait == Trait.AUTHENTICITY:
                v += -deception_cue * 0.02
            self.traits[trait] = max(PERSONALITY_MIN, min(PERSONALITY_MAX, v))
        return self.traits.copy()

    def display_profile(self) -> List[TraitScore]:
        """Big-Five display scores."""
        p = [float(v) for v in self.traits]
        return [
            TraitScore('Openness', js_round(lerp(70, 85, p[Trait.FORESIGHT]))),
            TraitScore('Conscientiousness', js_round(lerp(60, 90, p[Trait.ADAPTIVITY]))),
            TraitScore('Extraversion', js_round(lerp(45, 80, p[Trait.ASSERTIVENESS]))),
            TraitScore('Agreeableness', js_round(lerp(55, 88, p[Trait.COOPERATION]))),
            TraitScore('Neuroticism', js_round(lerp(20, 60, 1 - p[Trait.RESTRAINT]))),
        ]

    def fingerprint(self, hidden: Sequence[float], graph_signal: float) -> List[FingerprintEntry]:
        return [
            FingerprintEntry(
                trait=trait.label,
                score=js_round(float(self.traits[trait]) * 100),
                drift=js_round((float(hidden[trait % MEMORY_DIM]) + graph_signal) * 60),
            )
            for trait in Trait
        ]


__all__ = [
    'Trait',
    'INITIAL_PERSONALITY',
    'PERSONALITY_MIN',
    'PERSONALITY_MAX',
    'TraitScore',
    'FingerprintEntry',
    'PersonalityDrift',
]

"""
BCD Simulation Engine
=====================

Deterministic behavioral-cognitive simulator behind the dashboard:

    RandomSource → FrameGenerator → FeatureFusion → RecurrentMemory
        → ModalityGraph → PolicyAdapter → ModeTracker
        → CognitiveStateSynthesizer → PersonalityDrift → StepResult

Modules:
    rng.py          - RandomSource (seeded xorshift), SequenceSource
    frames.py       - ModalityDescriptor, SensorFrame, generate_frame
    fusion.py       - 11-feature fusion + summary statistics
    memory.py       - 4-slot gated recurrent memory
    graph.py        - weighted cross-modal graph signal
    policy.py       - reward shaping + bounded policy weights
    modes.py        - Dirichlet-style mode concentrations
    synthesis.py    - six bounded cognitive metrics
    personality.py  - trait drift, Big-Five profile, fingerprint
    state.py        - EngineState, StepResult
    invariants.py   - post-step bound checks
    core.py         - CognitiveEngine

Usage:
    from bcd.engine import CognitiveEngine, default_modalities

    engine = CognitiveEngine(seed=7)
    warm = engine.warmup(default_modalities(), steps=12)
    print(warm.last.to_dict()['cognitiveState'])
"""

from .rng import (
    DEFAULT_SEED,
    RandomSource,
    SequenceSource,
)

from .frames import (
    ModalityDescriptor,
    SensorFrame,
    FacialReading,
    VoiceReading,
    TextReading,
    PhysioReading,
    BehaviorReading,
    default_modalities,
    count_active,
    generate_frame,
    random_frame,
)

from .fusion import (
    FEATURE_ORDER,
    FusionResult,
    fuse_features,
)

from .memory import (
    MemorySlot,
    RecurrentMemory,
)

from .graph import (
    ModalityScores,
    modality_scores,
    graph_signal,
)

from .policy import (
    PolicyAdapter,
    compute_reward,
)

from .modes import (
    BehavioralMode,
    MODE_NAMES,
    Cues,
    derive_cues,
    ModeScore,
    ModeTracker,
)

from .synthesis import (
    CognitiveState,
    synthesize,
)

from .personality import (
    Trait,
    TraitScore,
    FingerprintEntry,
    PersonalityDrift,
)

from .state import (
    EngineState,
    FeatureImportance,
    BiasMetrics,
    SystemMetrics,
    TimelinePoint,
    ReactivityPoint,
    StepResult,
)

from .invariants import (
    InvariantViolation,
    check_state,
    check_result,
)

from .core import (
    CognitiveEngine,
    WarmupResult,
)


__all__ = [
    # RNG
    'DEFAULT_SEED',
    'RandomSource',
    'SequenceSource',

    # Frames
    'ModalityDescriptor',
    'SensorFrame',
    'FacialReading',
    'VoiceReading',
    'TextReading',
    'PhysioReading',
    'BehaviorReading',
    'default_modalities',
    'count_active',
    'generate_frame',
    'random_frame',

    # Pipeline stages
    'FEATURE_ORDER',
    'FusionResult',
    'fuse_features',
    'MemorySlot',
    'RecurrentMemory',
    'ModalityScores',
    'modality_scores',
    'graph_signal',
    'PolicyAdapter',
    'compute_reward',
    'BehavioralMode',
    'MODE_NAMES',
    'Cues',
    'derive_cues',
    'ModeScore',
    'ModeTracker',
    'CognitiveState',
    'synthesize',
    'Trait',
    'TraitScore',
    'FingerprintEntry',
    'PersonalityDrift',

    # State
    'EngineState',
    'FeatureImportance',
    'BiasMetrics',
    'SystemMetrics',
    'TimelinePoint',
    'ReactivityPoint',
    'StepResult',

    # Invariants
    'InvariantViolation',
    'check_state',
    'check_result',

    # Engine
    'CognitiveEngine',
    'WarmupResult',
]

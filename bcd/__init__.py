"""
BCD - Behavioral Cognitive Dashboard Engine
===========================================

Deterministic simulator that turns synthetic multi-modal sensor frames
into a bounded, continuously evolving "cognitive state":

    Session (timer) → Engine.step → StepResult → export / narrative
                          ↑
                     modalities (toggled by the operator)

Modules:
    engine/       - RandomSource, frames, fusion, memory, modes, synthesis
    config.py     - EngineConfig, SessionConfig, AlertConfig (YAML)
    session.py    - MonitoringSession (periodic driver, history, export)
    narrative.py  - dominant mode, narrative text, risk alerts
    schemas.py    - SessionExport (pydantic)
    cli.py        - `bcd` command line

Usage:
    from bcd import MonitoringSession

    session = MonitoringSession()
    result = session.tick()
    print(session.narrative())

Or run directly:
    python -m bcd run --ticks 10
"""

from .engine import (
    CognitiveEngine,
    WarmupResult,
    EngineState,
    StepResult,
    SensorFrame,
    ModalityDescriptor,
    RandomSource,
    default_modalities,
    generate_frame,
)

from .config import (
    EngineConfig,
    SessionConfig,
    AlertConfig,
    DashboardConfig,
    load_config,
    get_config,
    save_config,
)

from .narrative import (
    RiskAlert,
    dominant_mode,
    build_narrative,
    detect_risk_alert,
)

from .schemas import SessionExport

from .session import (
    MonitoringSession,
    load_export,
)

__version__ = "0.1.0"

__all__ = [
    # Engine
    'CognitiveEngine',
    'WarmupResult',
    'EngineState',
    'StepResult',
    'SensorFrame',
    'ModalityDescriptor',
    'RandomSource',
    'default_modalities',
    'generate_frame',

    # Config
    'EngineConfig',
    'SessionConfig',
    'AlertConfig',
    'DashboardConfig',
    'load_config',
    'get_config',
    'save_config',

    # Narrative
    'RiskAlert',
    'dominant_mode',
    'build_narrative',
    'detect_risk_alert',

    # Session
    'SessionExport',
    'MonitoringSession',
    'load_export',
]

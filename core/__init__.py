from .parameters import SimulationConfig, ThermalParameters
from .results import SimulationResults, ResultsRecorder

__all__ = [
    "SimulationConfig",
    "ThermalParameters",
    "SimulationResults",
    "ResultsRecorder",
]

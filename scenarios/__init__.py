from .base import Scenario
from .series_resistor import SeriesResistorScenario, ResistorOverloadScenario
from .led_indicator import LedIndicatorScenario
from .capacitor_charge import CapacitorChargeScenario
from .motor_start import MotorStartScenario

SCENARIOS = {
    "series": SeriesResistorScenario,
    "overload": ResistorOverloadScenario,
    "led": LedIndicatorScenario,
    "rc": CapacitorChargeScenario,
    "motor": MotorStartScenario,
}

__all__ = [
    "Scenario",
    "SeriesResistorScenario",
    "ResistorOverloadScenario",
    "LedIndicatorScenario",
    "CapacitorChargeScenario",
    "MotorStartScenario",
    "SCENARIOS",
]

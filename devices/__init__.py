"""Public exports for component physics models."""

from devices.base import Component, ComponentKind, Terminal
from devices.thermal import ThermalModel, ThermalState
from devices.source import Battery
from devices.resistor import Resistor
from devices.led import LED
from devices.capacitor import Capacitor
from devices.switch import Switch
from devices.motor import Motor

__all__ = [
    "Component",
    "ComponentKind",
    "Terminal",
    "ThermalModel",
    "ThermalState",
    "Battery",
    "Resistor",
    "LED",
    "Capacitor",
    "Switch",
    "Motor",
]

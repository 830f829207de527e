"""
Tests for component behavioural models, driven by setting terminal
voltages directly (no circuit solve).
"""

import unittest

import numpy as np

from devices import LED, Battery, Capacitor, Motor, Resistor, Switch
from devices.base import ComponentKind

DT = 1e-3


def _bias(component, v0, v1=0.0):
    component.terminals[0].voltage = v0
    component.terminals[1].voltage = v1
    return component


class TestComponentBase(unittest.TestCase):

    def test_id_is_prefixed_by_kind(self):
        r = Resistor()
        self.assertTrue(r.id.startswith("resistor_"))
        self.assertNotEqual(r.id, Resistor().id)

    def test_terminal_index_validation(self):
        r = Resistor()
        self.assertIs(r.terminal(1), r.terminals[1])
        with self.assertRaises(ValueError):
            r.terminal(2)

    def test_terminal_positions_follow_rotation(self):
        r = Resistor(position=(100.0, 100.0))
        np.testing.assert_allclose(r.terminals[0].position, [65.0, 100.0])
        np.testing.assert_allclose(r.terminals[1].position, [135.0, 100.0])

        r.rotation = np.pi / 2
        np.testing.assert_allclose(r.terminals[0].position, [100.0, 65.0], atol=1e-12)

    def test_contains_point(self):
        r = Resistor(position=(0.0, 0.0))
        self.assertTrue(r.contains_point((30.0, 10.0)))
        self.assertFalse(r.contains_point((0.0, 20.0)))
        r.rotation = np.pi / 2
        self.assertTrue(r.contains_point((0.0, 30.0)))

    def test_readouts_cover_base_quantities(self):
        readouts = Motor().readouts()
        for key in ("voltage", "current", "resistance", "temperature", "power", "burned", "rpm"):
            self.assertIn(key, readouts)


class TestBattery(unittest.TestCase):

    def test_emf_and_resistance(self):
        b = Battery(9.0, 0.1)
        self.assertEqual(b.kind, ComponentKind.SOURCE)
        self.assertEqual(b.voltage(), 9.0)
        self.assertEqual(b.emf(), 9.0)
        self.assertEqual(b.resistance(), 0.1)

    def test_burned_battery_has_no_emf(self):
        b = Battery(9.0)
        b.burn()
        self.assertEqual(b.voltage(), 0.0)
        self.assertEqual(b.emf(), 0.0)
        self.assertEqual(b.resistance(), np.inf)
        self.assertEqual(b.nominal_voltage, 9.0)

    def test_negative_internal_resistance_rejected(self):
        with self.assertRaises(ValueError):
            Battery(9.0, -1.0)


class TestResistor(unittest.TestCase):

    def test_ohms_law(self):
        r = _bias(Resistor(1000.0), 5.0)
        self.assertAlmostEqual(r.current(), 5e-3)
        r.update(DT)
        self.assertAlmostEqual(r.power_dissipation, 0.025)
        self.assertAlmostEqual(r.terminals[0].current, 5e-3)
        self.assertAlmostEqual(r.terminals[1].current, -5e-3)

    def test_set_resistance_clamps(self):
        r = Resistor(100.0)
        r.set_resistance(0.0)
        self.assertEqual(r.resistance(), 0.1)
        self.assertEqual(r.nominal_resistance, 0.1)

    def test_power_overload_burns(self):
        r = _bias(Resistor(100.0, rated_power=0.25), 9.0)
        r.update(DT)
        self.assertTrue(r.is_burned)
        self.assertEqual(r.resistance(), np.inf)
        self.assertEqual(r.current(), 0.0)

    def test_within_rating_survives(self):
        r = _bias(Resistor(1000.0, rated_power=0.25), 9.0)
        r.update(DT)
        self.assertFalse(r.is_burned)

    def test_color_bands(self):
        self.assertEqual(Resistor(1000.0).color_bands(), ["brown", "black", "red", "gold"])
        self.assertEqual(Resistor(220.0).color_bands(), ["red", "red", "brown", "gold"])
        self.assertEqual(Resistor(4.7).color_bands(), ["yellow", "violet", "gold", "gold"])
        self.assertEqual(Resistor(1.0).color_bands(), ["brown", "black", "gold", "gold"])

    def test_invalid_resistance(self):
        with self.assertRaises(ValueError):
            Resistor(0.0)


class TestLED(unittest.TestCase):

    def test_color_lookup(self):
        self.assertEqual(LED("green").forward_voltage, 2.2)
        self.assertEqual(LED("BLUE").forward_voltage, 3.2)
        unknown = LED("purple")
        self.assertEqual(unknown.color, "red")
        self.assertEqual(unknown.forward_voltage, 2.0)

    def test_resistance_regions(self):
        led = LED("red", forward_resistance=10.0, reverse_resistance=1e6)
        self.assertEqual(_bias(led, 3.0).resistance(), 10.0)
        self.assertAlmostEqual(_bias(led, 1.0).resistance(), 10.0 * np.exp(5.0))
        self.assertEqual(_bias(led, -1.0).resistance(), 1e6)
        self.assertEqual(_bias(led, 0.0).resistance(), 1e6)

    def test_current_below_and_above_threshold(self):
        led = LED("red")
        self.assertEqual(_bias(led, 1.9).current(), 0.0)
        self.assertAlmostEqual(_bias(led, 2.1).current(), 0.01)
        self.assertAlmostEqual(_bias(led, 2.2).current(), 0.02)

    def test_current_is_clamped(self):
        led = _bias(LED("red", max_current=0.03), 3.0)
        self.assertAlmostEqual(led.current(), 0.045)
        led.update(DT)
        self.assertFalse(led.is_burned)
        self.assertEqual(led.brightness, 1.0)

    def test_brightness_proportional_to_current(self):
        led = _bias(LED("red"), 2.15)
        led.update(DT)
        self.assertAlmostEqual(led.brightness, 0.5)
        self.assertAlmostEqual(led.power_dissipation, 2.15 * 0.015)

    def test_overcurrent_burns(self):
        led = _bias(LED("red", current_limit=3.0), 2.7)
        led.update(DT)
        self.assertTrue(led.is_burned)
        self.assertEqual(led.brightness, 0.0)
        self.assertEqual(led.resistance(), np.inf)
        self.assertEqual(led.current(), 0.0)


class TestCapacitor(unittest.TestCase):

    def test_voltage_is_charge_over_capacitance(self):
        c = Capacitor(1e-4)
        c.charge = 2e-4
        self.assertAlmostEqual(c.voltage(), 2.0)
        self.assertAlmostEqual(c.emf(), 2.0)
        self.assertEqual(c.resistance(), c.esr)

    def test_charge_integrates_esr_current(self):
        c = _bias(Capacitor(1e-4, esr=0.1), 1e-3)
        c.update(DT)
        self.assertAlmostEqual(c.charge, 1e-5)
        self.assertAlmostEqual(c.voltage(), 0.1)
        self.assertAlmostEqual(c.current(), 0.01)

    def test_overcharge_breaks_down(self):
        c = _bias(Capacitor(1e-4, rated_voltage=25.0, esr=0.1), 9.0)
        c.update(DT)
        self.assertTrue(c.is_burned)
        self.assertEqual(c.charge, 0.0)
        self.assertEqual(c.current(), 0.0)
        self.assertEqual(c.resistance(), np.inf)


class TestSwitch(unittest.TestCase):

    def test_open_blocks_current(self):
        s = _bias(Switch(is_open=True), 9.0)
        self.assertEqual(s.resistance(), 1e9)
        self.assertEqual(s.current(), 0.0)

    def test_toggle_closes(self):
        s = _bias(Switch(is_open=True, closed_resistance=0.01), 0.01)
        s.toggle()
        self.assertFalse(s.is_open)
        self.assertEqual(s.resistance(), 0.01)
        self.assertAlmostEqual(s.current(), 1.0)
        s.update(DT)
        self.assertAlmostEqual(s.power_dissipation, 0.01)

    def test_burned_switch_conducts_nothing(self):
        s = _bias(Switch(is_open=False), 9.0)
        s.burn()
        self.assertEqual(s.resistance(), np.inf)
        self.assertEqual(s.current(), 0.0)
        s.update(DT)
        self.assertEqual(s.power_dissipation, 0.0)
        self.assertEqual(s.terminals[0].current, 0.0)


class TestMotor(unittest.TestCase):

    def test_spin_up_step(self):
        m = _bias(Motor(), 9.0)
        self.assertAlmostEqual(m.current(), 1.8)
        m.update(DT)
        expected_rpm = 0.01 * 1.8 / 1e-4 * 60.0 / (2.0 * np.pi) * DT
        self.assertAlmostEqual(m.rpm, expected_rpm)
        self.assertAlmostEqual(m.rotor_angle, expected_rpm / 60.0 * DT * 2.0 * np.pi)
        self.assertAlmostEqual(m.power_dissipation, 1.8 ** 2 * 5.0)

    def test_back_emf_reduces_current(self):
        m = _bias(Motor(), 9.0)
        m.rpm = 400.0
        self.assertAlmostEqual(m.back_emf, 4.0)
        self.assertAlmostEqual(m.current(), 1.0)

    def test_rpm_clamped(self):
        m = _bias(Motor(max_rpm=100.0), 9.0)
        m.rpm = 100.0
        m.update(DT)
        self.assertEqual(m.rpm, 100.0)

        reverse = _bias(Motor(), -9.0)
        reverse.update(DT)
        self.assertEqual(reverse.rpm, 0.0)

    def test_burned_motor_coasts(self):
        m = _bias(Motor(), 9.0)
        m.rpm = 1000.0
        m.burn()
        m.update(DT)
        self.assertAlmostEqual(m.rpm, 950.0)
        self.assertGreater(m.rotor_angle, 0.0)
        self.assertEqual(m.resistance(), np.inf)
        self.assertEqual(m.current(), 0.0)
        self.assertEqual(m.power_dissipation, 0.0)


if __name__ == '__main__':
    unittest.main()

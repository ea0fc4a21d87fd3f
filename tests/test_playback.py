"""
Tests for the jitter and waypoint playback driver.
"""

import unittest

import numpy as np

from simlocate.config import PanelConfig
from simlocate.device import RecordingSink
from simlocate.geo import GeoPoint
from simlocate.playback import PlaybackDriver, PlaybackMode, button_label

A = GeoPoint.from_deg(1.0, 2.0)
B = GeoPoint.from_deg(3.0, 4.0)
C = GeoPoint.from_deg(5.0, 6.0)


class DriverTestCase(unittest.TestCase):
    """Shared fixtures: a driver on device "dev" with a recording sink."""

    def setUp(self):
        self.sink = RecordingSink()
        self.config = PanelConfig(latitude=10.0, longitude=20.0, jitter_seed=1234)
        self.driver = PlaybackDriver("dev", self.sink, self.config)

    def emitted(self):
        return [(c.latitude, c.longitude) for c in self.sink.commands]

    @staticmethod
    def coords(point):
        return (point.lat_deg, point.lon_deg)


class TestSimulate(DriverTestCase):
    """Test stepping through imported waypoints."""

    def test_full_playback_cycle(self):
        """Test start, tick, exhaustion and restart over two waypoints."""
        self.driver.load_waypoints([A, B])

        self.driver.toggle_simulate()
        self.assertEqual(self.emitted(), [self.coords(A)])
        self.assertEqual(self.driver.cursor, 1)
        self.assertEqual(self.driver.mode, PlaybackMode.SIMULATING)

        self.driver.tick()
        self.assertEqual(self.emitted(), [self.coords(A), self.coords(B)])
        self.assertEqual(self.driver.cursor, 2)

        self.driver.tick()
        self.assertEqual(len(self.sink.commands), 2)
        self.assertEqual(self.driver.mode, PlaybackMode.IDLE)
        self.assertEqual(self.driver.button_label, "Restart")

        self.driver.toggle_simulate()
        self.assertEqual(self.sink.last.latitude, A.lat_deg)
        self.assertEqual(self.driver.cursor, 1)
        self.assertEqual(self.driver.mode, PlaybackMode.SIMULATING)

    def test_device_id_is_forwarded(self):
        """Test that every command carries the driver's device id."""
        self.driver.load_waypoints([A])
        self.driver.toggle_simulate()
        self.assertEqual(self.sink.last.device_id, "dev")
        self.assertEqual(self.sink.last.argv[:2], ["location", "dev"])

    def test_step_recentres_base_and_pin(self):
        """Test that each waypoint becomes the base and the pinned marker."""
        self.driver.load_waypoints([A, B])
        self.driver.toggle_simulate()
        self.assertEqual(self.driver.base, A)
        self.assertEqual(self.driver.pinned, A)
        self.driver.tick()
        self.assertEqual(self.driver.base, B)
        self.assertEqual(self.driver.displayed, B)

    def test_stop_and_resume(self):
        """Test that stopping keeps the cursor and resuming continues from it."""
        self.driver.load_waypoints([A, B, C])
        self.driver.toggle_simulate()
        self.driver.toggle_simulate()
        self.assertEqual(self.driver.mode, PlaybackMode.IDLE)
        self.assertEqual(self.driver.cursor, 1)
        self.assertEqual(len(self.sink.commands), 1)

        self.driver.tick()
        self.assertEqual(len(self.sink.commands), 1)

        self.driver.toggle_simulate()
        self.assertEqual(self.sink.last.latitude, B.lat_deg)
        self.assertEqual(self.driver.cursor, 2)

    def test_button_labels(self):
        """Test the simulate button label through a playback."""
        self.driver.load_waypoints([A, B])
        self.assertEqual(self.driver.button_label, "Start")
        self.driver.toggle_simulate()
        self.assertEqual(self.driver.button_label, "Stop")
        self.driver.toggle_simulate()
        self.assertEqual(self.driver.button_label, "Resume")
        self.driver.toggle_simulate()
        self.driver.tick()
        self.driver.tick()
        self.assertEqual(self.driver.button_label, "Restart")

    def test_stop_after_last_waypoint_keeps_cursor(self):
        """Test that stopping right after the last waypoint reads "Restart"."""
        self.driver.load_waypoints([A, B])
        self.driver.toggle_simulate()
        self.driver.tick()
        self.assertEqual(self.driver.cursor, 2)
        self.assertEqual(self.driver.mode, PlaybackMode.SIMULATING)

        self.driver.toggle_simulate()
        self.assertEqual(self.driver.mode, PlaybackMode.IDLE)
        self.assertEqual(self.driver.cursor, 2)
        self.assertEqual(self.driver.button_label, "Restart")
        self.assertEqual(len(self.sink.commands), 2)

    def test_button_label_function(self):
        """Test label precedence."""
        self.assertEqual(button_label(PlaybackMode.SIMULATING, 2, 2), "Stop")
        self.assertEqual(button_label(PlaybackMode.IDLE, 2, 2), "Restart")
        self.assertEqual(button_label(PlaybackMode.JITTERING, 1, 2), "Resume")
        self.assertEqual(button_label(PlaybackMode.IDLE, 0, 2), "Start")

    def test_empty_waypoint_list(self):
        """Test that starting with no waypoints emits nothing and stays idle."""
        self.driver.toggle_simulate()
        self.assertEqual(self.sink.commands, [])
        self.assertEqual(self.driver.mode, PlaybackMode.IDLE)

    def test_load_waypoints_rewinds_and_stops(self):
        """Test that a new import resets the cursor and stops playback."""
        self.driver.load_waypoints([A, B, C])
        self.driver.toggle_simulate()
        self.driver.tick()
        self.driver.load_waypoints([C])
        self.assertEqual(self.driver.cursor, 0)
        self.assertEqual(self.driver.mode, PlaybackMode.IDLE)
        self.assertEqual(self.driver.waypoints, (C,))
        self.assertEqual(self.driver.button_label, "Start")


class TestJitter(DriverTestCase):
    """Test random jitter around the base coordinate."""

    def test_toggle_does_not_emit(self):
        """Test that jitter waits for the next tick."""
        self.driver.toggle_jitter()
        self.assertEqual(self.driver.mode, PlaybackMode.JITTERING)
        self.assertEqual(self.sink.commands, [])

    def test_ticks_stay_within_radius(self):
        """Test every jittered coordinate lies within the radius of the base."""
        base = self.driver.base
        radius = self.config.jitter_radius
        self.driver.toggle_jitter()
        for _ in range(50):
            self.driver.tick()
            jittered = self.driver.jittered
            self.assertLessEqual(abs(jittered.lat_deg - base.lat_deg), radius + 1e-12)
            self.assertLessEqual(abs(jittered.lon_deg - base.lon_deg), radius + 1e-12)
            self.assertEqual(self.driver.pinned, jittered)
            self.assertEqual(self.driver.displayed, jittered)
        self.assertEqual(len(self.sink.commands), 50)
        self.assertEqual(self.driver.base, base)

    def test_offsets_vary(self):
        """Test that consecutive ticks draw fresh offsets."""
        self.driver.toggle_jitter()
        self.driver.tick()
        self.driver.tick()
        first, second = self.sink.commands
        self.assertNotEqual((first.latitude, first.longitude), (second.latitude, second.longitude))

    def test_turning_off_reverts_to_base(self):
        """Test that stopping jitter shows the base again, exactly."""
        self.driver.toggle_jitter()
        self.driver.tick()
        self.driver.toggle_jitter()
        self.assertIsNone(self.driver.jittered)
        self.assertIs(self.driver.displayed, self.driver.base)
        self.driver.tick()
        self.assertEqual(len(self.sink.commands), 1)
        self.assertEqual(self.driver.location_text, "10.00000, 20.00000")

    def test_seeded_generator_is_reproducible(self):
        """Test that equal seeds yield equal jitter sequences."""
        other_sink = RecordingSink()
        other = PlaybackDriver("dev", other_sink, rng=np.random.default_rng(1234),
                               config=PanelConfig(latitude=10.0, longitude=20.0))
        for driver in (self.driver, other):
            driver.toggle_jitter()
            for _ in range(3):
                driver.tick()
        self.assertEqual(self.sink.commands, other_sink.commands)


class TestActivateAndModes(DriverTestCase):
    """Test the manual path and mode exclusivity."""

    def test_activate_sends_base_when_idle(self):
        """Test that Activate sends and pins the base."""
        sent = self.driver.activate()
        self.assertEqual(sent, self.driver.base)
        self.assertEqual(self.driver.pinned, sent)
        self.assertEqual(self.emitted(), [self.coords(sent)])

    def test_activate_sends_jittered_when_present(self):
        """Test that Activate prefers the current jittered coordinate."""
        self.driver.toggle_jitter()
        self.driver.tick()
        jittered = self.driver.jittered
        self.assertEqual(self.driver.activate(), jittered)

    def test_activate_while_simulating(self):
        """Test that Activate works independently of playback."""
        self.driver.load_waypoints([A, B])
        self.driver.toggle_simulate()
        self.assertEqual(self.driver.activate(), A)
        self.assertEqual(self.driver.cursor, 1)
        self.assertEqual(self.driver.mode, PlaybackMode.SIMULATING)

    def test_simulate_takes_over_from_jitter(self):
        """Test that starting playback stops jitter and clears its coordinate."""
        self.driver.load_waypoints([A, B])
        self.driver.toggle_jitter()
        self.driver.tick()
        self.driver.toggle_simulate()
        self.assertEqual(self.driver.mode, PlaybackMode.SIMULATING)
        self.assertIsNone(self.driver.jittered)
        self.sink.clear()
        self.driver.tick()
        self.assertEqual(self.emitted(), [self.coords(B)])

    def test_jitter_takes_over_from_simulate(self):
        """Test that starting jitter pauses playback at its cursor."""
        self.driver.load_waypoints([A, B])
        self.driver.toggle_simulate()
        self.driver.toggle_jitter()
        self.assertEqual(self.driver.mode, PlaybackMode.JITTERING)
        self.assertEqual(self.driver.button_label, "Resume")
        self.driver.tick()
        self.assertEqual(self.driver.cursor, 1)

    def test_set_base_does_not_emit(self):
        """Test that moving the base does not contact the device."""
        self.driver.set_base(C)
        self.assertEqual(self.driver.base, C)
        self.assertEqual(self.sink.commands, [])


class TestListeners(DriverTestCase):
    """Test state-change notifications."""

    def test_snapshots_follow_changes(self):
        """Test that listeners see each change as an immutable snapshot."""
        snapshots = []
        self.driver.subscribe(snapshots.append)
        self.driver.load_waypoints([A, B])
        self.driver.toggle_simulate()
        self.driver.tick()
        self.assertEqual([s.cursor for s in snapshots], [0, 1, 2])
        self.assertEqual(snapshots[1].button_label, "Stop")
        self.assertEqual(snapshots[-1].displayed, B)
        self.assertEqual(snapshots[-1].total, 2)

    def test_unsubscribe(self):
        """Test that an unsubscribed listener is not called."""
        snapshots = []
        self.driver.subscribe(snapshots.append)
        self.driver.unsubscribe(snapshots.append)
        self.driver.tick()
        self.assertEqual(snapshots, [])


if __name__ == '__main__':
    unittest.main()

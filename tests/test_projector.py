import copy
from unittest import TestCase

from drtscene.config.config import SceneParams
from drtscene.engine.projector import project
from drtscene.engine.visibility import (
    waiting_passenger,
    active_destination,
    match_connector,
    occupied_connector,
    vehicle_record,
)


TRIP = {"route": [[0, 0], [1, 1], [2, 2]], "timestamp": [0, 5, 20]}
PAX = {"location": [127.13, 37.48], "timestamp": [5, 15]}


class VisibilityTests(TestCase):
    def test_passenger_window_is_half_open(self):
        self.assertIsNotNone(waiting_passenger(PAX, 5))
        self.assertIsNotNone(waiting_passenger(PAX, 14.999))
        self.assertIsNone(waiting_passenger(PAX, 15))
        self.assertIsNone(waiting_passenger(PAX, 4.999))

    def test_passenger_needs_exactly_two_times(self):
        self.assertIsNone(waiting_passenger({"location": [0, 0], "timestamp": [1, 2, 3]}, 1.5))
        self.assertIsNone(waiting_passenger({"location": [0, 0], "timestamp": [1, "x"]}, 1.5))
        self.assertIsNone(waiting_passenger({"timestamp": [1, 2]}, 1.5))

    def test_destination_window_is_inclusive(self):
        for t in (5, 12, 20):
            self.assertEqual(active_destination(TRIP, t), {"location": [2, 2]})
        self.assertIsNone(active_destination(TRIP, 4.999))
        self.assertIsNone(active_destination(TRIP, 20.001))

    def test_match_connector_until_pickup(self):
        arc = match_connector(TRIP, 2.5)
        self.assertEqual(arc["source"], [0.5, 0.5])
        self.assertEqual(arc["target"], [1, 1])
        self.assertIsNotNone(match_connector(TRIP, 5))
        self.assertIsNone(match_connector(TRIP, 5.5))

    def test_occupied_connector_after_pickup(self):
        arc = occupied_connector(TRIP, 12.5)
        self.assertEqual(arc["source"], [1.5, 1.5])
        self.assertEqual(arc["target"], [2, 2])
        self.assertIsNone(occupied_connector(TRIP, 4))
        self.assertIsNone(occupied_connector(TRIP, 21))

    def test_malformed_trips_are_excluded(self):
        bad = [
            {},
            {"route": [[0, 0]], "timestamp": [0]},
            {"route": [[0, 0], [1, 1]], "timestamp": [0, 5, 10]},
            {"route": [[0, 0], [1, 1]], "timestamp": [0, None]},
            {"route": None, "timestamp": [0, 5]},
            "not-a-trip",
        ]
        for trip in bad:
            self.assertIsNone(vehicle_record(trip))
            self.assertIsNone(active_destination(trip, 3))
            self.assertIsNone(match_connector(trip, 3))
            self.assertIsNone(occupied_connector(trip, 3))


class ProjectTests(TestCase):
    def setUp(self):
        self.trips = [
            copy.deepcopy(TRIP),
            {"route": [[10, 10], [11, 11]], "timestamp": [30, 40]},
            {"route": [[0, 0]], "timestamp": [0]},
        ]
        self.passengers = [
            copy.deepcopy(PAX),
            {"location": [1, 1], "timestamp": [30, 35]},
            {"location": [1, 1]},
        ]

    def test_collections_at_time(self):
        scene = project(self.trips, self.passengers, 10, SceneParams())
        self.assertEqual(len(scene.vehicles), 2)
        self.assertEqual(len(scene.waiting_passengers), 1)
        self.assertEqual(scene.destinations, [{"location": [2, 2]}])
        self.assertEqual(scene.connectors_a, [])
        self.assertEqual(scene.connectors_b, [])
        self.assertEqual(scene.time, 10)

    def test_connector_flags_are_independent(self):
        only_a = project(self.trips, self.passengers, 2, SceneParams(show_match_arcs=True))
        self.assertEqual(len(only_a.connectors_a), 1)
        self.assertEqual(only_a.connectors_b, [])

        only_b = project(self.trips, self.passengers, 10, SceneParams(show_occ_arcs=True))
        self.assertEqual(only_b.connectors_a, [])
        self.assertEqual(len(only_b.connectors_b), 1)

    def test_empty_dataset(self):
        scene = project([], None, 420)
        self.assertEqual(scene.counts(), {
            "vehicles": 0, "waiting": 0, "destinations": 0, "connectors_a": 0, "connectors_b": 0,
        })

    def test_idempotent_and_does_not_mutate_inputs(self):
        P = SceneParams(show_match_arcs=True, show_occ_arcs=True)
        trips_before = copy.deepcopy(self.trips)
        pax_before = copy.deepcopy(self.passengers)

        first = project(self.trips, self.passengers, 5, P)
        second = project(self.trips, self.passengers, 5, P)
        self.assertEqual(first, second)

        first.vehicles[0]["route"][0][0] = 999
        first.waiting_passengers[0]["location"][0] = 999
        self.assertEqual(self.trips, trips_before)
        self.assertEqual(self.passengers, pax_before)

    def test_to_dict_keys(self):
        d = project(self.trips, self.passengers, 10).to_dict()
        self.assertEqual(
            set(d),
            {"time", "vehicles", "waitingPassengers", "destinations", "connectorsA", "connectorsB",
             "trailLength"},
        )

    def test_trail_length_carried_to_renderer(self):
        scene = project(self.trips, self.passengers, 10, SceneParams(trail_length=2.5))
        self.assertEqual(scene.trail_length, 2.5)
        self.assertEqual(scene.to_dict()["trailLength"], 2.5)
        self.assertEqual(project([], [], 10).to_dict()["trailLength"], SceneParams().trail_length)

"""
Unit tests for generate_points_hash.

Covers determinism, order and field sensitivity, empty input and speed.
"""

import time

from area_sessions.core.points_hash import generate_points_hash
from area_sessions.models import LatLng, TrackedPoint


class TestPointsHashDeterminism:
    """Same points always produce the same digest."""

    def test_repeated_calls_return_same_hash(self, sample_points):
        assert generate_points_hash(sample_points) == generate_points_hash(sample_points)

    def test_equal_but_distinct_instances_hash_equal(self, point_factory):
        first = [point_factory(1.5, 2.5, "auto", 10), point_factory(3.0, 4.0, "manual", 20)]
        second = [point_factory(1.5, 2.5, "auto", 10), point_factory(3.0, 4.0, "manual", 20)]

        assert first is not second
        assert generate_points_hash(first) == generate_points_hash(second)

    def test_int_and_float_coordinates_hash_equal(self):
        as_int = [TrackedPoint(point=LatLng(lat=32, lng=34), type="manual", timestamp=1000)]
        as_float = [TrackedPoint(point=LatLng(lat=32.0, lng=34.0), type="manual", timestamp=1000)]

        assert generate_points_hash(as_int) == generate_points_hash(as_float)


class TestPointsHashSensitivity:
    """Any change to order or a participating field changes the digest."""

    def test_reversed_order_changes_hash(self, sample_points):
        assert generate_points_hash(sample_points) != generate_points_hash(list(reversed(sample_points)))

    def test_swapping_two_points_changes_hash(self, point_factory):
        a = point_factory(1.0, 1.0, timestamp=1)
        b = point_factory(2.0, 2.0, timestamp=2)

        assert generate_points_hash([a, b]) != generate_points_hash([b, a])

    def test_lat_change_changes_hash(self, point_factory):
        base = generate_points_hash([point_factory(lat=32.0)])
        assert generate_points_hash([point_factory(lat=32.000001)]) != base

    def test_lng_change_changes_hash(self, point_factory):
        base = generate_points_hash([point_factory(lng=34.0)])
        assert generate_points_hash([point_factory(lng=34.1)]) != base

    def test_type_change_changes_hash(self, point_factory):
        base = generate_points_hash([point_factory(point_type="manual")])
        assert generate_points_hash([point_factory(point_type="auto")]) != base

    def test_timestamp_change_changes_hash(self, point_factory):
        base = generate_points_hash([point_factory(timestamp=1000)])
        assert generate_points_hash([point_factory(timestamp=1001)]) != base

    def test_smallest_float_difference_changes_hash(self, point_factory):
        lat = 32.123456789
        next_lat = lat + 2 ** -47  # one ulp at this magnitude

        assert next_lat != lat
        assert generate_points_hash([point_factory(lat=lat)]) != generate_points_hash(
            [point_factory(lat=next_lat)]
        )

    def test_appending_point_changes_hash(self, sample_points, point_factory):
        extended = [*sample_points, point_factory(40.0, 40.0)]
        assert generate_points_hash(extended) != generate_points_hash(sample_points)


class TestPointsHashShape:
    """Output format and edge cases."""

    def test_empty_sequence_returns_non_empty_hash(self):
        digest = generate_points_hash([])

        assert isinstance(digest, str)
        assert digest
        assert generate_points_hash([]) == digest

    def test_hash_is_lowercase_base36(self, sample_points):
        digest = generate_points_hash(sample_points)

        assert digest.isalnum()
        assert digest == digest.lower()

    def test_thousand_points_hash_quickly(self, point_factory):
        points = [
            point_factory(32.0 + i * 1e-5, 34.0 - i * 1e-5, "auto", 1706698800000 + i)
            for i in range(1000)
        ]

        start = time.perf_counter()
        generate_points_hash(points)
        elapsed = time.perf_counter() - start

        assert elapsed < 0.5

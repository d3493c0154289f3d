"""
Registration, dispatch and coverage audit of the intersection registry.
"""
import logging

import pytest

from geokernel import Circle, Segment, Vector2
from geokernel.intersection import (
    DEFAULT_REGISTRY,
    IntersectionRegistry,
    RegistryFrozenError,
    build_default_registry,
    get_unique_points,
)
from geokernel.model.kinds import ShapeKind


class TestDispatch:
    def test_empty_registry_degrades_to_no_intersection(self):
        registry = IntersectionRegistry()
        circle = Circle.create(Vector2(0, 0), 1)
        assert registry.intersect(circle, circle) == (False, [])
        assert registry.has_intersection(circle, circle) is False

    def test_mirrored_lookup_swaps_arguments(self):
        calls = []

        def handler(a, b):
            calls.append((a.kind, b.kind))
            return True, [Vector2(1, 2)]

        registry = IntersectionRegistry()
        registry.register_intersection(ShapeKind.CIRCLE, ShapeKind.SEGMENT, handler)
        circle = Circle.create(Vector2(0, 0), 1)
        segment = Segment.create(Vector2(0, 0), Vector2(1, 0))

        assert registry.intersect(segment, circle) == (True, [Vector2(1, 2)])
        assert registry.intersect(circle, segment) == (True, [Vector2(1, 2)])
        assert calls == [
            (ShapeKind.CIRCLE, ShapeKind.SEGMENT),
            (ShapeKind.CIRCLE, ShapeKind.SEGMENT),
        ]

    def test_tables_are_independent(self):
        registry = IntersectionRegistry()
        registry.register_has_intersection(ShapeKind.CIRCLE, ShapeKind.CIRCLE, lambda a, b: True)
        circle = Circle.create(Vector2(0, 0), 1)
        assert registry.has_intersection(circle, circle)
        assert registry.intersect(circle, circle) == (False, [])
        assert registry.get_intersection_handler(ShapeKind.CIRCLE, ShapeKind.CIRCLE) is None

    def test_unregistered_pair_is_logged(self, caplog):
        registry = IntersectionRegistry()
        circle = Circle.create(Vector2(0, 0), 1)
        with caplog.at_level(logging.DEBUG, logger="geokernel.intersection.registry"):
            registry.intersect(circle, circle)
        assert "No intersection handler" in caplog.text


class TestRegistration:
    def test_duplicate_registration_rejected(self):
        registry = IntersectionRegistry()
        registry.register_intersection(ShapeKind.LINE, ShapeKind.RAY, lambda a, b: (False, []))
        with pytest.raises(ValueError):
            registry.register_intersection(ShapeKind.LINE, ShapeKind.RAY, lambda a, b: (False, []))

    def test_mirrored_registration_rejected(self):
        registry = IntersectionRegistry()
        registry.register_has_intersection(ShapeKind.LINE, ShapeKind.RAY, lambda a, b: False)
        with pytest.raises(ValueError):
            registry.register_has_intersection(ShapeKind.RAY, ShapeKind.LINE, lambda a, b: False)

    def test_frozen_registry_rejects_registration(self):
        registry = IntersectionRegistry()
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register_intersection(ShapeKind.LINE, ShapeKind.LINE, lambda a, b: (False, []))
        with pytest.raises(RegistryFrozenError):
            registry.register_has_intersection(ShapeKind.LINE, ShapeKind.LINE, lambda a, b: False)


class TestCoverage:
    def test_fresh_registry_misses_every_pair(self):
        report = IntersectionRegistry().find_missing_pairs()
        assert len(report.missing_intersections) == 55
        assert len(report.missing_has_intersections) == 55
        assert not report.is_complete

    def test_audit_warns_per_missing_pair(self, caplog):
        registry = IntersectionRegistry()
        registry.register_intersection(ShapeKind.LINE, ShapeKind.LINE, lambda a, b: (False, []))
        with caplog.at_level(logging.WARNING, logger="geokernel.intersection.registry"):
            report = registry.check_missing_intersections()
        warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
        assert len(warnings) == 54 + 55
        assert (ShapeKind.LINE, ShapeKind.LINE) not in report.missing_intersections

    def test_default_registry_is_complete_and_frozen(self):
        assert DEFAULT_REGISTRY.frozen
        assert DEFAULT_REGISTRY.find_missing_pairs().is_complete

    def test_build_default_registry_is_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="geokernel.intersection.registry"):
            registry = build_default_registry()
        assert registry.frozen
        assert not caplog.records


class TestUniquePoints:
    def test_textual_deduplication(self):
        points = [Vector2(1, 1), Vector2(1.0000001, 1), Vector2(2, 2), Vector2(1, 1)]
        unique = get_unique_points(points)
        assert len(unique) == 2
        assert unique[0] is points[0]
        assert unique[1] is points[2]

    def test_tolerance_deduplication(self):
        points = [Vector2(1, 1), Vector2(1.0000001, 1)]
        assert len(get_unique_points(points, tolerance=1e-9)) == 2
        assert len(get_unique_points(points, tolerance=1e-3)) == 1

    def test_empty_input(self):
        assert get_unique_points([]) == []

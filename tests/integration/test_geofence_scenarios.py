"""
Integration tests: geofencing and route-tracking workflows through the
public package API.
"""
import pytest
import math
from pathlib import Path

import spherical_geometry as sg
from spherical_geometry.utils.config import load_config


DUBLIN = sg.LatLng(53.3498, -6.2603)
CORK = sg.LatLng(51.8985, -8.4756)


@pytest.fixture
def hexagon_fence():
    """Regular hexagon with 2 km circumradius centred on Cork."""
    return [sg.compute_offset(CORK, 2000.0, heading) for heading in range(0, 360, 60)]


@pytest.fixture
def route():
    """Dublin to Cork great-circle route sampled at 11 waypoints."""
    return [sg.interpolate(DUBLIN, CORK, i / 10) for i in range(11)]


@pytest.fixture
def mars_config(tmp_path):
    """Config file for a sphere other than Earth."""
    path = Path(tmp_path) / "mars.yaml"
    path.write_text("earth_radius: 3389500.0\ntolerance: 5.0\ngeodesic: true\n")
    return load_config(path)


class TestEndToEnd:
    """Headline scenarios through the top-level package."""

    def test_pole_to_pole_distance(self):
        distance = sg.compute_distance_between((90, 0), (-90, 0))
        assert distance == pytest.approx(math.pi * sg.EARTH_RADIUS, abs=1e-6)
        assert distance == pytest.approx(20015114.35, rel=1e-6)

    def test_quarter_circle_offset_reaches_pole(self):
        dest = sg.compute_offset((0, 0), math.pi * sg.EARTH_RADIUS / 2, 0)
        assert dest.lat == pytest.approx(90.0, abs=1e-6)

    def test_interpolate_one_degree(self):
        assert sg.interpolate((0, 0), (90, 0), 1 / 90).lat == pytest.approx(1.0, abs=1e-6)

    def test_public_api_exported(self):
        for name in sg.__all__:
            assert hasattr(sg, name)


class TestGeofence:
    """Point-in-fence checks against a polygon built from offsets."""

    def test_vertices_on_circle(self, hexagon_fence):
        for vertex in hexagon_fence:
            assert sg.compute_distance_between(CORK, vertex) == pytest.approx(2000.0, rel=1e-9)

    @pytest.mark.parametrize("geodesic", [True, False])
    def test_centre_inside(self, hexagon_fence, geodesic):
        assert sg.contains_location(CORK, hexagon_fence, geodesic)

    @pytest.mark.parametrize("geodesic", [True, False])
    def test_far_point_outside(self, hexagon_fence, geodesic):
        outside = sg.compute_offset(CORK, 3000.0, 30.0)
        assert not sg.contains_location(outside, hexagon_fence, geodesic)

    def test_near_point_inside(self, hexagon_fence):
        inside = sg.compute_offset(CORK, 1500.0, 200.0)
        assert sg.contains_location(inside, hexagon_fence)

    def test_area_and_perimeter(self, hexagon_fence):
        """Small fence: spherical results match the planar hexagon."""
        expected_area = 3 * math.sqrt(3) / 2 * 2000.0 ** 2
        assert sg.compute_area(hexagon_fence) == pytest.approx(expected_area, rel=1e-3)

        perimeter = sg.compute_length(hexagon_fence + [hexagon_fence[0]])
        assert perimeter == pytest.approx(6 * 2000.0, rel=1e-3)

    def test_fence_winding(self, hexagon_fence):
        """Clockwise and counter-clockwise fences enclose the same area."""
        reversed_fence = list(reversed(hexagon_fence))
        assert sg.compute_signed_area(reversed_fence) == pytest.approx(-sg.compute_signed_area(hexagon_fence))
        assert sg.contains_location(CORK, reversed_fence)

    def test_edge_midpoint_on_edge(self, hexagon_fence):
        midpoint = sg.interpolate(hexagon_fence[2], hexagon_fence[3], 0.5)
        assert sg.is_location_on_edge(midpoint, hexagon_fence)
        assert sg.location_index_on_edge(midpoint, hexagon_fence) == 2

    def test_closing_edge(self, hexagon_fence):
        midpoint = sg.interpolate(hexagon_fence[-1], hexagon_fence[0], 0.5)
        assert sg.is_location_on_edge(midpoint, hexagon_fence)
        assert not sg.is_location_on_path(midpoint, hexagon_fence)

    def test_fence_across_antimeridian(self):
        fence = [(-15, 175), (-15, -175), (-20, -175), (-20, 175)]
        for geodesic in (True, False):
            assert sg.contains_location((-17.5, 180), fence, geodesic)
            assert sg.contains_location((-17.5, -179), fence, geodesic)
            assert not sg.contains_location((-17.5, 170), fence, geodesic)


class TestRouteTracking:
    """Proximity of positions to a planned route."""

    def test_route_length(self, route):
        """Waypoints on one great circle add up to the direct distance."""
        assert sg.compute_length(route) == pytest.approx(sg.compute_distance_between(DUBLIN, CORK), rel=1e-9)

    def test_position_on_route(self, route):
        position = sg.interpolate(DUBLIN, CORK, 0.35)
        assert sg.is_location_on_path(position, route)
        assert sg.location_index_on_path(position, route) == 3

    def test_position_off_route(self, route):
        on_route = sg.interpolate(DUBLIN, CORK, 0.35)
        heading = sg.compute_heading(on_route, CORK)
        off_route = sg.compute_offset(on_route, 50.0, heading + 90)

        assert not sg.is_location_on_path(off_route, route)
        assert sg.location_index_on_path(off_route, route) == -1
        assert sg.is_location_on_path(off_route, route, tolerance=100.0)

    def test_distance_to_route_segment(self, route):
        on_route = sg.interpolate(DUBLIN, CORK, 0.35)
        heading = sg.compute_heading(on_route, CORK)
        off_route = sg.compute_offset(on_route, 50.0, heading - 90)

        # The foot of the perpendicular is found in lat/lng space, so the
        # result is only close to the 50 m cross-track distance.
        distance = sg.distance_to_line(off_route, route[3], route[4])
        assert 25.0 < distance < 100.0
        assert distance <= sg.compute_distance_between(off_route, route[3])
        assert distance <= sg.compute_distance_between(off_route, route[4])

    def test_backtrack_legs(self):
        """Walking a survey chain backwards recovers every station."""
        legs = [(1200.0, 45.0), (800.0, 170.0), (2500.0, -60.0)]
        stations = [DUBLIN]
        for distance, heading in legs:
            stations.append(sg.compute_offset(stations[-1], distance, heading))

        position = stations[-1]
        for (distance, heading), expected in zip(reversed(legs), reversed(stations[:-1])):
            position = sg.compute_offset_origin(position, distance, heading)
            assert position.lat == pytest.approx(expected.lat, abs=1e-9)
            assert position.lng == pytest.approx(expected.lng, abs=1e-9)


class TestConfiguredSphere:
    """Computations parameterised by a loaded configuration."""

    def test_distance_on_configured_sphere(self, mars_config):
        distance = sg.compute_distance_between((90, 0), (-90, 0), radius=mars_config.earth_radius)
        assert distance == pytest.approx(math.pi * 3389500.0)

    def test_area_scales_with_radius_squared(self, mars_config):
        fence = [(0, 0), (0, 1), (1, 1), (1, 0)]
        ratio = sg.compute_area(fence, radius=mars_config.earth_radius) / sg.compute_area(fence)
        assert ratio == pytest.approx((3389500.0 / sg.EARTH_RADIUS) ** 2)

    def test_configured_tolerance(self, mars_config):
        equator = [(0, 90), (0, 180)]
        three_metres_north = sg.compute_offset((0, 135), 3.0, 0)
        assert not sg.is_location_on_path(three_metres_north, equator)
        assert sg.is_location_on_path(
            three_metres_north, equator,
            tolerance=mars_config.tolerance, geodesic=mars_config.geodesic
        )

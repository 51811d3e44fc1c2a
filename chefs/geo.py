"""Spherical distance helpers for nearby-chef search."""
from math import asin, cos, degrees, radians, sin, sqrt
from typing import Iterable, List, Tuple

EARTH_RADIUS_KM = 6378.0


def central_angle(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Angle in radians between two points on a sphere (haversine)."""
    lat1_rad, lng1_rad = radians(lat1), radians(lng1)
    lat2_rad, lng2_rad = radians(lat2), radians(lng2)

    dlat = lat2_rad - lat1_rad
    dlng = lng2_rad - lng1_rad

    a = sin(dlat / 2) ** 2 + cos(lat1_rad) * cos(lat2_rad) * sin(dlng / 2) ** 2
    return 2 * asin(min(1.0, sqrt(a)))


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    return EARTH_RADIUS_KM * central_angle(lat1, lng1, lat2, lng2)


def within_radius(lat: float, lng: float, other_lat: float, other_lng: float, radius_km: float) -> bool:
    return central_angle(lat, lng, other_lat, other_lng) <= radius_km / EARTH_RADIUS_KM


def latitude_bounds(lat: float, radius_km: float) -> Tuple[float, float]:
    """Latitude band that contains every point within ``radius_km`` of ``lat``."""
    delta = degrees(radius_km / EARTH_RADIUS_KM)
    return max(-90.0, lat - delta), min(90.0, lat + delta)


def chefs_near(chefs: Iterable, lat: float, lng: float, radius_km: float) -> List:
    """Keep the chefs whose account coordinates fall inside the radius."""
    results = []
    for chef in chefs:
        user = chef.user
        if not user.has_coordinates:
            continue
        if within_radius(lat, lng, float(user.latitude), float(user.longitude), radius_km):
            results.append(chef)
    return results

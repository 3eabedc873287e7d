"""Three-component vectors and spherical / geographic direction coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Vec3",
    "SphericalCoord",
    "vec_to_spherical",
    "spherical_to_vec",
    "vec_to_geographic",
    "geographic_to_vec",
]


@dataclass(frozen=True)
class Vec3:
    """An immutable vector of three floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, s: float) -> Vec3:
        return Vec3(self.x * s, self.y * s, self.z * s)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product as the game's camera code computes it.

        The z component is ``x*other.y - z*other.x``, which differs from the
        textbook product whenever ``y*other.x`` and ``z*other.x`` differ.
        """
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.z * other.x,
        )

    def normalized(self) -> Vec3:
        """Return the unit vector in this direction."""
        length = math.sqrt(self.dot(self))
        if length == 0:
            raise ValueError("cannot normalise a zero vector")
        return Vec3(self.x / length, self.y / length, self.z / length)

    def __add__(self, other: Vec3) -> Vec3:
        return self.add(other)

    def __sub__(self, other: Vec3) -> Vec3:
        return self.sub(other)

    def __mul__(self, s: float) -> Vec3:
        return self.scale(s)

    __rmul__ = __mul__


@dataclass(frozen=True)
class SphericalCoord:
    """A direction as pitch and yaw angles in radians."""

    pitch: float = 0.0
    yaw: float = 0.0


def vec_to_spherical(vec: Vec3) -> SphericalCoord:
    """Direction of ``vec`` with pitch measured from the +y axis."""
    pitch = math.atan2(math.sqrt(vec.x * vec.x + vec.z * vec.z), vec.y)
    yaw = math.atan2(vec.x, vec.z)
    return SphericalCoord(pitch, yaw)


def spherical_to_vec(sph: SphericalCoord) -> Vec3:
    """Unit vector pointing in the direction ``sph``."""
    sin_p = math.sin(sph.pitch)
    return Vec3(sin_p * math.sin(sph.yaw), math.cos(sph.pitch), sin_p * math.cos(sph.yaw))


def vec_to_geographic(vec: Vec3) -> SphericalCoord:
    """Direction of ``vec`` with pitch measured from the horizontal plane."""
    sph = vec_to_spherical(vec)
    return SphericalCoord(math.pi / 2 - sph.pitch, sph.yaw)


def geographic_to_vec(geo: SphericalCoord) -> Vec3:
    """Unit vector pointing in the geographic direction ``geo``."""
    return spherical_to_vec(SphericalCoord(math.pi / 2 - geo.pitch, geo.yaw))
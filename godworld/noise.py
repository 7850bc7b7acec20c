"""Perlin simplex noise in one, two and three dimensions, with fBm summation."""

from __future__ import annotations

import math

__all__ = ["SimplexNoise", "noise1d", "noise2d", "noise3d"]

_PERM = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36,
    103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148, 247, 120, 234, 75,
    0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33, 88, 237, 149,
    56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46,
    245, 40, 244, 102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187,
    208, 89, 18, 169, 200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186,
    3, 64, 52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213, 119, 248,
    152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9, 129, 22, 39, 253,
    19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228, 251, 34,
    242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4,
    150, 254, 138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66,
    215, 61, 156, 180,
)

_F2 = 0.366025403  # (sqrt(3) - 1) / 2
_G2 = 0.211324865  # (3 - sqrt(3)) / 6
_F3 = 1.0 / 3.0
_G3 = 1.0 / 6.0


def _hash(i: int) -> int:
    return _PERM[i & 0xFF]


def _grad1(hash_value: int, x: float) -> float:
    h = hash_value & 0x0F
    grad = 1.0 + (h & 7)
    if h & 8:
        grad = -grad
    return grad * x


def _grad2(hash_value: int, x: float, y: float) -> float:
    h = hash_value & 0x3F
    u, v = (x, y) if h < 4 else (y, x)
    return (-u if h & 1 else u) + (-2.0 * v if h & 2 else 2.0 * v)


def _grad3(hash_value: int, x: float, y: float, z: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


def noise1d(x: float) -> float:
    """1D simplex noise in [-1, 1]; zero on every integer coordinate."""
    i0 = math.floor(x)
    i1 = i0 + 1
    x0 = x - i0
    x1 = x0 - 1.0

    t0 = (1.0 - x0 * x0) ** 2
    n0 = t0 * t0 * _grad1(_hash(i0), x0)

    t1 = (1.0 - x1 * x1) ** 2
    n1 = t1 * t1 * _grad1(_hash(i1), x1)

    return 0.395 * (n0 + n1)


def _corner2(t: float, gradient: int, x: float, y: float) -> float:
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * _grad2(gradient, x, y)


def noise2d(x: float, y: float) -> float:
    """2D simplex noise in [-1, 1]."""
    s = (x + y) * _F2
    i = math.floor(x + s)
    j = math.floor(y + s)

    t = (i + j) * _G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    i1, j1 = (1, 0) if x0 > y0 else (0, 1)

    x1 = x0 - i1 + _G2
    y1 = y0 - j1 + _G2
    x2 = x0 - 1.0 + 2.0 * _G2
    y2 = y0 - 1.0 + 2.0 * _G2

    gi0 = _hash(i + _hash(j))
    gi1 = _hash(i + i1 + _hash(j + j1))
    gi2 = _hash(i + 1 + _hash(j + 1))

    n0 = _corner2(0.5 - x0 * x0 - y0 * y0, gi0, x0, y0)
    n1 = _corner2(0.5 - x1 * x1 - y1 * y1, gi1, x1, y1)
    n2 = _corner2(0.5 - x2 * x2 - y2 * y2, gi2, x2, y2)

    return 45.23065 * (n0 + n1 + n2)


def _corner3(gradient: int, x: float, y: float, z: float) -> float:
    t = 0.6 - x * x - y * y - z * z
    if t < 0:
        return 0.0
    t *= t
    return t * t * _grad3(gradient, x, y, z)


def _simplex_offsets(x0: float, y0: float, z0: float) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    if x0 >= y0:
        if y0 >= z0:
            return (1, 0, 0), (1, 1, 0)
        if x0 >= z0:
            return (1, 0, 0), (1, 0, 1)
        return (0, 0, 1), (1, 0, 1)
    if y0 < z0:
        return (0, 0, 1), (0, 1, 1)
    if x0 < z0:
        return (0, 1, 0), (0, 1, 1)
    return (0, 1, 0), (1, 1, 0)


def noise3d(x: float, y: float, z: float) -> float:
    """3D simplex noise, scaled to stay just inside [-1, 1]."""
    s = (x + y + z) * _F3
    i = math.floor(x + s)
    j = math.floor(y + s)
    k = math.floor(z + s)
    t = (i + j + k) * _G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    (i1, j1, k1), (i2, j2, k2) = _simplex_offsets(x0, y0, z0)

    x1, y1, z1 = x0 - i1 + _G3, y0 - j1 + _G3, z0 - k1 + _G3
    x2, y2, z2 = x0 - i2 + 2.0 * _G3, y0 - j2 + 2.0 * _G3, z0 - k2 + 2.0 * _G3
    x3, y3, z3 = x0 - 1.0 + 3.0 * _G3, y0 - 1.0 + 3.0 * _G3, z0 - 1.0 + 3.0 * _G3

    gi0 = _hash(i + _hash(j + _hash(k)))
    gi1 = _hash(i + i1 + _hash(j + j1 + _hash(k + k1)))
    gi2 = _hash(i + i2 + _hash(j + j2 + _hash(k + k2)))
    gi3 = _hash(i + 1 + _hash(j + 1 + _hash(k + 1)))

    total = (
        _corner3(gi0, x0, y0, z0)
        + _corner3(gi1, x1, y1, z1)
        + _corner3(gi2, x2, y2, z2)
        + _corner3(gi3, x3, y3, z3)
    )
    return 32.0 * total


_NOISE_BY_DIMENSION = {1: noise1d, 2: noise2d, 3: noise3d}


class SimplexNoise:
    """Fractal Brownian motion summation of simplex noise octaves."""

    def __init__(
        self,
        frequency: float = 1.0,
        amplitude: float = 1.0,
        lacunarity: float = 2.0,
        persistence: float = 0.5,
    ) -> None:
        self.frequency = frequency
        self.amplitude = amplitude
        self.lacunarity = lacunarity
        self.persistence = persistence

    def fractal(self, octaves: int, *args: float) -> float:
        """Sum ``octaves`` layers of 1D, 2D or 3D noise at the given coordinates."""
        try:
            noise = _NOISE_BY_DIMENSION[len(args)]
        except KeyError:
            raise TypeError(
                f"fractal() takes 1 to 3 coordinates, got {len(args)}"
            ) from None
        if octaves < 1:
            raise ValueError("octaves must be at least 1")

        output = 0.0
        denom = 0.0
        frequency = self.frequency
        amplitude = self.amplitude
        for _ in range(octaves):
            output += amplitude * noise(*(c * frequency for c in args))
            denom += amplitude
            frequency *= self.lacunarity
            amplitude *= self.persistence
        return output / denom
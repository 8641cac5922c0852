"""Colour-space conversion and noise helpers."""

from __future__ import annotations

import math

_U32 = 0xFFFFFFFF


def _fract(value: float) -> float:
    return value - math.trunc(value)


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert hue (in turns), saturation and lightness to an RGB triple."""
    spread = s * (1.0 - abs(2.0 * l - 1.0)) / 2.0
    high = l + spread
    low = l - spread
    h = _fract(_fract(h) + 1.0)
    match int(math.floor(h * 6.0)) % 6:
        case 0:
            return (high, low + (high - low) * h * 6.0, low)
        case 1:
            return (low + (high - low) * (1.0 / 3.0 - h) * 6.0, high, low)
        case 2:
            return (low, high, low + (high - low) * (h - 1.0 / 3.0) * 6.0)
        case 3:
            return (low, low + (high - low) * (2.0 / 3.0 - h) * 6.0, high)
        case 4:
            return (low + (high - low) * (h - 2.0 / 3.0) * 6.0, low, high)
        case 5:
            return (high, low, low + (high - low) * (1.0 - h) * 6.0)
        case _:
            return (low, low, low)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert an RGB triple to hue (in turns), saturation and lightness."""
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min
    if delta == 0.0:
        h = 0.0
    elif c_max == r:
        h = math.fmod((g - b) / delta, 6.0) / 6.0
    elif c_max == g:
        h = ((b - r) / delta + 2.0) / 6.0
    else:
        h = ((r - g) / delta + 4.0) / 6.0
    l = (c_max + c_min) / 2.0
    s = 0.0 if delta == 0.0 else delta / (1.0 - abs(2.0 * l - 1.0))
    return (h, s, l)


def u32_noise(x: int, y: int, z: int) -> int:
    """Experimental integer hash noise with 32-bit wrapping arithmetic."""
    x &= _U32
    y &= _U32
    z &= _U32
    w = (x * 2777 + y * 2999 + z * 3252 + 0xA241EE91) & _U32
    left = (((x ^ w) + z) * ((y ^ w) + z)) & _U32
    right = ((x + w) * (y + w) * (z + w)) & _U32
    return ((left ^ right) + 0x9A6246F3) & _U32


_PP = (
    151, 160, 137, 91, 90, 15,
    131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23,
    190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33,
    88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244,
    102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196,
    135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123,
    5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42,
    223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228,
    251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)


def _perm(index: int) -> int:
    return _PP[index % 256]


def _lattice(value: float) -> int:
    floored = math.floor(value) if math.isfinite(value) else value
    if floored != floored or floored <= 0:
        return 0
    if floored >= 2.0 ** 64:
        return 255
    return int(floored) & 255


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def noise(x: float, y: float, z: float) -> float:
    """Classic improved Perlin noise in three dimensions."""
    xx = _lattice(x)
    yy = _lattice(y)
    zz = _lattice(z)
    x -= math.floor(x)
    y -= math.floor(y)
    z -= math.floor(z)
    u = _fade(x)
    v = _fade(y)
    w = _fade(z)
    a = _perm(xx) + yy
    aa = _perm(a) + zz
    ab = _perm(a + 1) + zz
    b = _perm(xx + 1) + yy
    ba = _perm(b) + zz
    bb = _perm(b + 1) + zz
    return _lerp(
        w,
        _lerp(
            v,
            _lerp(u, _grad(_perm(aa), x, y, z), _grad(_perm(ba), x - 1.0, y, z)),
            _lerp(u, _grad(_perm(ab), x, y - 1.0, z), _grad(_perm(bb), x - 1.0, y - 1.0, z)),
        ),
        _lerp(
            v,
            _lerp(
                u,
                _grad(_perm(aa + 1), x, y, z - 1.0),
                _grad(_perm(ba + 1), x - 1.0, y, z - 1.0),
            ),
            _lerp(
                u,
                _grad(_perm(ab + 1), x, y - 1.0, z - 1.0),
                _grad(_perm(bb + 1), x - 1.0, y - 1.0, z - 1.0),
            ),
        ),
    )
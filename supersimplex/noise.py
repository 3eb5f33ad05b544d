"""OpenSimplex 2 noise, smooth variant ("SuperSimplex").

- 2D is standard simplex noise modified to support larger kernels, evaluated
  from a lookup table.
- 3D is re-oriented 8-point BCC noise, built from two interleaved cubic
  lattices.
- 4D uses a pregenerated 4x4x4x4 lookup partitioning of the unit hypercube.

Several orientations are offered for each dimension; see each method.
"""

from __future__ import annotations

from typing import Tuple

from .gradients import PMASK, PSIZE, gradients_2d, gradients_3d, gradients_4d
from .lattice import lookup_2d, lookup_3d
from .lookup4d import lookup_4d

_MULTIPLIER = 6364136223846793005
_INCREMENT = 1442695040888963407
_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63


def _wrap64(value: int) -> int:
    """Reduce ``value`` to a signed 64-bit integer with two's-complement wrap."""
    value &= _MASK64
    return value - (1 << 64) if value & _SIGN64 else value


def fast_floor(x: float) -> int:
    """Return the largest integer not greater than ``x``."""
    xi = int(x)
    return xi - 1 if x < xi else xi


def _shuffle(seed: int) -> Tuple[int, ...]:
    """Build the seeded permutation of ``range(PSIZE)``."""
    source = list(range(PSIZE))
    perm = [0] * PSIZE
    seed = _wrap64(seed)
    for i in range(PSIZE - 1, -1, -1):
        seed = _wrap64(seed * _MULTIPLIER + _INCREMENT)
        r = _wrap64(seed + 31) % (i + 1)
        perm[i] = source[r]
        source[r] = source[i]
    return tuple(perm)


class OpenSimplex2S:
    """Seeded SuperSimplex noise generator for 2, 3 and 4 dimensions."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = _wrap64(seed)
        self.perm: Tuple[int, ...] = _shuffle(self.seed)
        g2, g3, g4 = gradients_2d(), gradients_3d(), gradients_4d()
        self._grad2 = tuple(g2[p] for p in self.perm)
        self._grad3 = tuple(g3[p] for p in self.perm)
        self._grad4 = tuple(g4[p] for p in self.perm)

    # ----------------------------------------------------------------- 2D

    def noise2(self, x: float, y: float) -> float:
        """2D SuperSimplex noise, standard lattice orientation."""
        s = 0.366025403784439 * (x + y)
        return self._noise2_base(x + s, y + s)

    def noise2_x_before_y(self, x: float, y: float) -> float:
        """2D SuperSimplex noise with Y pointing down the main diagonal.

        Suits a 2D sandbox-style world where Y is vertical.
        """
        xx = x * 0.7071067811865476
        yy = y * 1.224744871380249
        return self._noise2_base(yy + xx, yy - xx)

    def _noise2_base(self, xs: float, ys: float) -> float:
        xsb = fast_floor(xs)
        ysb = fast_floor(ys)
        xsi = xs - xsb
        ysi = ys - ysb

        a = int(xsi + ysi)
        index = (
            (a << 2)
            | (int(xsi - ysi / 2 + 1 - a / 2.0) << 3)
            | (int(ysi - xsi / 2 + 1 - a / 2.0) << 4)
        )

        ssi = (xsi + ysi) * -0.211324865405187
        xi = xsi + ssi
        yi = ysi + ssi

        perm = self.perm
        value = 0.0
        for c in lookup_2d()[index:index + 4]:
            dx = xi + c.dx
            dy = yi + c.dy
            attn = 2.0 / 3.0 - dx * dx - dy * dy
            if attn <= 0:
                continue
            pxm = (xsb + c.xsv) & PMASK
            pym = (ysb + c.ysv) & PMASK
            gx, gy = self._grad2[perm[pxm] ^ pym]
            attn *= attn
            value += attn * attn * (gx * dx + gy * dy)
        return value

    # ----------------------------------------------------------------- 3D

    def noise3_classic(self, x: float, y: float, z: float) -> float:
        """3D re-oriented 8-point BCC noise, classic orientation."""
        r = (2.0 / 3.0) * (x + y + z)
        return self._noise3_bcc(r - x, r - y, r - z)

    def noise3_xy_before_z(self, x: float, y: float, z: float) -> float:
        """3D BCC noise with better visual isotropy in (X, Y).

        Z should be the "different" coordinate, e.g. height or time.
        """
        xy = x + y
        s2 = xy * -0.211324865405187
        zz = z * 0.577350269189626
        return self._noise3_bcc(x + s2 - zz, y + s2 - zz, xy * 0.577350269189626 + zz)

    def noise3_xz_before_y(self, x: float, y: float, z: float) -> float:
        """3D BCC noise with better visual isotropy in (X, Z).

        Y should be the "different" coordinate, e.g. height or time.
        """
        xz = x + z
        s2 = xz * -0.211324865405187
        yy = y * 0.577350269189626
        return self._noise3_bcc(x + s2 - yy, xz * 0.577350269189626 + yy, z + s2 - yy)

    def _noise3_bcc(self, xr: float, yr: float, zr: float) -> float:
        xrb = fast_floor(xr)
        yrb = fast_floor(yr)
        zrb = fast_floor(zr)
        xri = xr - xrb
        yri = yr - yrb
        zri = zr - zrb

        xht = int(xri + 0.5)
        yht = int(yri + 0.5)
        zht = int(zri + 0.5)
        index = xht | (yht << 1) | (zht << 2)

        perm = self.perm
        value = 0.0
        node = lookup_3d()[index]
        while node is not None:
            dxr = xri + node.dxr
            dyr = yri + node.dyr
            dzr = zri + node.dzr
            attn = 0.75 - dxr * dxr - dyr * dyr - dzr * dzr
            if attn < 0:
                node = node.next_on_failure
                continue
            pxm = (xrb + node.xrv) & PMASK
            pym = (yrb + node.yrv) & PMASK
            pzm = (zrb + node.zrv) & PMASK
            gx, gy, gz = self._grad3[perm[perm[pxm] ^ pym] ^ pzm]
            attn *= attn
            value += attn * attn * (gx * dxr + gy * dyr + gz * dzr)
            node = node.next_on_success
        return value

    # ----------------------------------------------------------------- 4D

    def noise4_classic(self, x: float, y: float, z: float, w: float) -> float:
        """4D SuperSimplex noise, classic lattice orientation."""
        s = 0.309016994374947 * (x + y + z + w)
        return self._noise4_base(x + s, y + s, z + s, w + s)

    def noise4_xy_before_zw(self, x: float, y: float, z: float, w: float) -> float:
        """4D noise with XY and ZW forming orthogonal triangular-based planes.

        Suits 3D terrain with X and Y horizontal, or the
        ``noise(x, y, sin(t), cos(t))`` looping trick.
        """
        s2 = (x + y) * -0.28522513987434876941 + (z + w) * 0.83897065470611435718
        t2 = (z + w) * 0.21939749883706435719 + (x + y) * -0.48214856493302476942
        return self._noise4_base(x + s2, y + s2, z + t2, w + t2)

    def noise4_xz_before_yw(self, x: float, y: float, z: float, w: float) -> float:
        """4D noise with XZ and YW forming orthogonal triangular-based planes.

        Suits 3D terrain with X and Z horizontal.
        """
        s2 = (x + z) * -0.28522513987434876941 + (y + w) * 0.83897065470611435718
        t2 = (y + w) * 0.21939749883706435719 + (x + z) * -0.48214856493302476942
        return self._noise4_base(x + s2, y + t2, z + s2, w + t2)

    def noise4_xyz_before_w(self, x: float, y: float, z: float, w: float) -> float:
        """4D noise with XYZ oriented like ``noise3_classic`` and W free.

        Suits time-varied animation of a textured 3D object (W as time).
        """
        xyz = x + y + z
        ww = w * 1.118033988749894
        s2 = xyz * -0.16666666666666666 + ww
        return self._noise4_base(x + s2, y + s2, z + s2, -0.5 * xyz + ww)

    def _noise4_base(self, xs: float, ys: float, zs: float, ws: float) -> float:
        xsb = fast_floor(xs)
        ysb = fast_floor(ys)
        zsb = fast_floor(zs)
        wsb = fast_floor(ws)
        xsi = xs - xsb
        ysi = ys - ysb
        zsi = zs - zsb
        wsi = ws - wsb

        ssi = (xsi + ysi + zsi + wsi) * -0.138196601125011
        xi = xsi + ssi
        yi = ysi + ssi
        zi = zsi + ssi
        wi = wsi + ssi

        index = (
            (fast_floor(xs * 4) & 3)
            | ((fast_floor(ys * 4) & 3) << 2)
            | ((fast_floor(zs * 4) & 3) << 4)
            | ((fast_floor(ws * 4) & 3) << 6)
        )

        perm = self.perm
        value = 0.0
        for c in lookup_4d()[index]:
            dx = xi + c.dx
            dy = yi + c.dy
            dz = zi + c.dz
            dw = wi + c.dw
            attn = 0.8 - dx * dx - dy * dy - dz * dz - dw * dw
            if attn <= 0:
                continue
            attn *= attn
            pxm = (xsb + c.xsv) & PMASK
            pym = (ysb + c.ysv) & PMASK
            pzm = (zsb + c.zsv) & PMASK
            pwm = (wsb + c.wsv) & PMASK
            gx, gy, gz, gw = self._grad4[perm[perm[perm[pxm] ^ pym] ^ pzm] ^ pwm]
            value += attn * attn * (gx * dx + gy * dy + gz * dz + gw * dw)
        return value
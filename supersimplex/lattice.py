"""Lattice point tables for the 2D and 3D SuperSimplex noise functions.

The 2D table holds four candidate points for each of eight regions of a
skewed unit cell. The 3D table holds, for each octant of a cube, the head of
a decision chain. The chain visits the BCC lattice points that can contribute
and skips those ruled out by an earlier point being in range.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterator, Optional, Tuple

_UNSKEW_2D = -0.211324865405187
_UNSKEW_4D = -0.138196601125011
_LATTICE_OFFSET_3D = 1024


@dataclass(frozen=True)
class LatticePoint2D:
    """A 2D lattice vertex with its skewed offset and unskewed displacement."""

    xsv: int
    ysv: int
    dx: float = field(init=False)
    dy: float = field(init=False)

    def __post_init__(self) -> None:
        ssv = (self.xsv + self.ysv) * _UNSKEW_2D
        object.__setattr__(self, "dx", -self.xsv - ssv)
        object.__setattr__(self, "dy", -self.ysv - ssv)


@dataclass(frozen=True)
class LatticePoint4D:
    """A 4D lattice vertex with its skewed offset and unskewed displacement."""

    xsv: int
    ysv: int
    zsv: int
    wsv: int
    dx: float = field(init=False)
    dy: float = field(init=False)
    dz: float = field(init=False)
    dw: float = field(init=False)

    def __post_init__(self) -> None:
        ssv = (self.xsv + self.ysv + self.zsv + self.wsv) * _UNSKEW_4D
        object.__setattr__(self, "dx", -self.xsv - ssv)
        object.__setattr__(self, "dy", -self.ysv - ssv)
        object.__setattr__(self, "dz", -self.zsv - ssv)
        object.__setattr__(self, "dw", -self.wsv - ssv)


class LatticePoint3D:
    """A node in the 3D BCC decision chain.

    ``lattice`` selects one of the two interleaved cubic half-lattices: the
    second one is shifted by half a cell and its hash coordinates by 1024.
    """

    __slots__ = ("dxr", "dyr", "dzr", "xrv", "yrv", "zrv",
                 "next_on_failure", "next_on_success")

    def __init__(self, xrv: int, yrv: int, zrv: int, lattice: int) -> None:
        half = lattice * 0.5
        shift = lattice * _LATTICE_OFFSET_3D
        self.dxr: float = -xrv + half
        self.dyr: float = -yrv + half
        self.dzr: float = -zrv + half
        self.xrv: int = xrv + shift
        self.yrv: int = yrv + shift
        self.zrv: int = zrv + shift
        self.next_on_failure: Optional[LatticePoint3D] = None
        self.next_on_success: Optional[LatticePoint3D] = None

    def walk(self, in_range) -> Iterator["LatticePoint3D"]:
        """Yield the chain from this node, branching on ``in_range(node)``."""
        node: Optional[LatticePoint3D] = self
        while node is not None:
            yield node
            node = node.next_on_success if in_range(node) else node.next_on_failure

    def __repr__(self) -> str:
        return (f"LatticePoint3D(xrv={self.xrv}, yrv={self.yrv}, zrv={self.zrv}, "
                f"dxr={self.dxr}, dyr={self.dyr}, dzr={self.dzr})")


def _link(node: LatticePoint3D, on_failure: Optional[LatticePoint3D],
          on_success: Optional[LatticePoint3D]) -> None:
    node.next_on_failure = on_failure
    node.next_on_success = on_success


def _region_corners_2d(region: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    if region & 1 == 0:
        first = (1, 0) if region & 2 else (-1, 0)
        second = (0, 1) if region & 4 else (0, -1)
    else:
        first = (2, 1) if region & 2 else (0, 1)
        second = (1, 2) if region & 4 else (1, 0)
    return first, second


@lru_cache(maxsize=None)
def lookup_2d() -> Tuple[LatticePoint2D, ...]:
    """Return the 32-entry 2D table: four points for each of eight regions."""
    points = []
    for region in range(8):
        first, second = _region_corners_2d(region)
        points.extend((
            LatticePoint2D(0, 0),
            LatticePoint2D(1, 1),
            LatticePoint2D(*first),
            LatticePoint2D(*second),
        ))
    return tuple(points)


def _octant_chain(octant: int) -> LatticePoint3D:
    i1 = octant & 1
    j1 = (octant >> 1) & 1
    k1 = (octant >> 2) & 1
    i2, j2, k2 = i1 ^ 1, j1 ^ 1, k1 ^ 1

    # The two points within this octant, one from each half-lattice.
    c0 = LatticePoint3D(i1, j1, k1, 0)
    c1 = LatticePoint3D(i1 + i2, j1 + j2, k1 + k2, 1)

    # (1, 0, 0) vs (0, 1, 1) away from the octant, on both half-lattices.
    c2 = LatticePoint3D(i1 ^ 1, j1, k1, 0)
    c3 = LatticePoint3D(i1, j1 ^ 1, k1 ^ 1, 0)
    c4 = LatticePoint3D(i1 + (i2 ^ 1), j1 + j2, k1 + k2, 1)
    c5 = LatticePoint3D(i1 + i2, j1 + (j2 ^ 1), k1 + (k2 ^ 1), 1)

    # (0, 1, 0) vs (1, 0, 1) away from the octant.
    c6 = LatticePoint3D(i1, j1 ^ 1, k1, 0)
    c7 = LatticePoint3D(i1 ^ 1, j1, k1 ^ 1, 0)
    c8 = LatticePoint3D(i1 + i2, j1 + (j2 ^ 1), k1 + k2, 1)
    c9 = LatticePoint3D(i1 + (i2 ^ 1), j1 + j2, k1 + (k2 ^ 1), 1)

    # (0, 0, 1) vs (1, 1, 0) away from the octant.
    ca = LatticePoint3D(i1, j1, k1 ^ 1, 0)
    cb = LatticePoint3D(i1 ^ 1, j1 ^ 1, k1, 0)
    cc = LatticePoint3D(i1 + i2, j1 + j2, k1 + (k2 ^ 1), 1)
    cd = LatticePoint3D(i1 + (i2 ^ 1), j1 + (j2 ^ 1), k1 + k2, 1)

    _link(c0, c1, c1)
    _link(c1, c2, c2)
    _link(c2, c3, c5)
    _link(c3, c4, c4)
    _link(c4, c5, c6)
    _link(c5, c6, c6)
    _link(c6, c7, c9)
    _link(c7, c8, c8)
    _link(c8, c9, ca)
    _link(c9, ca, ca)
    _link(ca, cb, cd)
    _link(cb, cc, cc)
    _link(cc, cd, None)
    _link(cd, None, None)
    return c0


@lru_cache(maxsize=None)
def lookup_3d() -> Tuple[LatticePoint3D, ...]:
    """Return the heads of the eight per-octant 3D decision chains."""
    return tuple(_octant_chain(octant) for octant in range(8))
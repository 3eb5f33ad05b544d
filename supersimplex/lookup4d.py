"""Lattice point table for the 4D SuperSimplex noise function.

The unit hypercube is split into a 4x4x4x4 grid of sub-cells. For each
sub-cell the table lists every lattice vertex that can contribute to the
noise value at a point inside it. A vertex is stored as one byte holding
four two-bit fields (x in the lowest bits, w in the highest), each field
being the vertex coordinate plus one.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from .lattice import LatticePoint4D

_SIZES: Tuple[int, ...] = (
    20, 15, 16, 17, 15, 16, 12, 15, 16, 12, 10, 14, 17, 15, 14, 17,
    15, 16, 12, 15, 16, 14, 14, 13, 12, 14, 11, 12, 15, 13, 12, 14,
    16, 12, 10, 14, 12, 14, 11, 12, 10, 11, 10, 13, 14, 12, 13, 15,
    17, 15, 14, 17, 15, 13, 12, 14, 14, 12, 13, 15, 17, 14, 15, 17,
    15, 16, 12, 15, 16, 14, 14, 13, 12, 14, 11, 12, 15, 13, 12, 14,
    16, 14, 14, 13, 14, 16, 16, 10, 14, 16, 19, 11, 13, 10, 11, 10,
    12, 14, 11, 12, 14, 16, 19, 11, 11, 19, 13, 14, 12, 11, 14, 13,
    15, 13, 12, 14, 13, 10, 11, 10, 12, 11, 14, 13, 14, 10, 13, 13,
    16, 12, 10, 14, 12, 14, 11, 12, 10, 11, 10, 13, 14, 12, 13, 15,
    12, 14, 11, 12, 14, 16, 19, 11, 11, 19, 13, 14, 12, 11, 14, 13,
    10, 11, 10, 13, 11, 19, 13, 14, 10, 13, 16, 14, 13, 14, 14, 16,
    14, 12, 13, 15, 12, 11, 14, 13, 13, 14, 14, 16, 15, 13, 16, 15,
    17, 15, 14, 17, 15, 13, 12, 14, 14, 12, 13, 15, 17, 14, 15, 17,
    15, 13, 12, 14, 13, 10, 11, 10, 12, 11, 14, 13, 14, 10, 13, 13,
    14, 12, 13, 15, 12, 11, 14, 13, 13, 14, 14, 16, 15, 13, 16, 15,
    17, 14, 15, 17, 14, 10, 13, 13, 15, 13, 16, 15, 17, 13, 15, 20,
)

_ROWS: Tuple[str, ...] = (
    "15 45 51 54 55 56 59 5A 65 66 69 6A 95 96 99 9A A5 A6 A9 AA",
    "15 45 51 55 56 59 5A 65 66 6A 95 96 9A A6 AA",
    "01 05 11 15 41 45 51 55 56 5A 66 6A 96 9A A6 AA",
    "01 15 16 45 46 51 52 55 56 5A 66 6A 96 9A A6 AA AB",
    "15 45 54 55 56 59 5A 65 69 6A 95 99 9A A9 AA",
    "05 15 45 55 56 59 5A 65 66 69 6A 95 96 99 9A AA",
    "05 15 45 55 56 59 5A 66 6A 96 9A AA",
    "05 15 16 45 46 55 56 59 5A 66 6A 96 9A AA AB",
    "04 05 14 15 44 45 54 55 59 5A 69 6A 99 9A A9 AA",
    "05 15 45 55 56 59 5A 69 6A 99 9A AA",
    "05 15 45 55 56 59 5A 6A 9A AA",
    "05 15 16 45 46 55 56 59 5A 5B 6A 9A AA AB",
    "04 15 19 45 49 54 55 58 59 5A 69 6A 99 9A A9 AA AE",
    "05 15 19 45 49 55 56 59 5A 69 6A 99 9A AA AE",
    "05 15 19 45 49 55 56 59 5A 5E 6A 9A AA AE",
    "05 15 1A 45 4A 55 56 59 5A 5B 5E 6A 9A AA AB AE AF",
    "15 51 54 55 56 59 65 66 69 6A 95 A5 A6 A9 AA",
    "11 15 51 55 56 59 5A 65 66 69 6A 95 96 A5 A6 AA",
    "11 15 51 55 56 5A 65 66 6A 96 A6 AA",
    "11 15 16 51 52 55 56 5A 65 66 6A 96 A6 AA AB",
    "14 15 54 55 56 59 5A 65 66 69 6A 95 99 A5 A9 AA",
    "15 55 56 59 5A 65 66 69 6A 95 9A A6 A9 AA",
    "15 55 56 59 5A 65 66 69 6A 96 9A A6 AA AB",
    "15 16 55 56 5A 66 6A 6B 96 9A A6 AA AB",
    "14 15 54 55 59 5A 65 69 6A 99 A9 AA",
    "15 55 56 59 5A 65 66 69 6A 99 9A A9 AA AE",
    "15 55 56 59 5A 65 66 69 6A 9A AA",
    "15 16 55 56 59 5A 66 6A 6B 9A AA AB",
    "14 15 19 54 55 58 59 5A 65 69 6A 99 A9 AA AE",
    "15 19 55 59 5A 69 6A 6E 99 9A A9 AA AE",
    "15 19 55 56 59 5A 69 6A 6E 9A AA AE",
    "15 1A 55 56 59 5A 6A 6B 6E 9A AA AB AE AF",
    "10 11 14 15 50 51 54 55 65 66 69 6A A5 A6 A9 AA",
    "11 15 51 55 56 65 66 69 6A A5 A6 AA",
    "11 15 51 55 56 65 66 6A A6 AA",
    "11 15 16 51 52 55 56 65 66 67 6A A6 AA AB",
    "14 15 54 55 59 65 66 69 6A A5 A9 AA",
    "15 55 56 59 5A 65 66 69 6A A5 A6 A9 AA BA",
    "15 55 56 59 5A 65 66 69 6A A6 AA",
    "15 16 55 56 5A 65 66 6A 6B A6 AA AB",
    "14 15 54 55 59 65 69 6A A9 AA",
    "15 55 56 59 5A 65 66 69 6A A9 AA",
    "15 55 56 59 5A 65 66 69 6A AA",
    "15 16 55 56 59 5A 65 66 69 6A 6B AA AB",
    "14 15 19 54 55 58 59 65 69 6A 6D A9 AA AE",
    "15 19 55 59 5A 65 69 6A 6E A9 AA AE",
    "15 19 55 56 59 5A 65 66 69 6A 6E AA AE",
    "15 55 56 59 5A 66 69 6A 6B 6E 9A AA AB AE AF",
    "10 15 25 51 54 55 61 64 65 66 69 6A A5 A6 A9 AA BA",
    "11 15 25 51 55 56 61 65 66 69 6A A5 A6 AA BA",
    "11 15 25 51 55 56 61 65 66 6A 76 A6 AA BA",
    "11 15 26 51 55 56 62 65 66 67 6A 76 A6 AA AB BA BB",
    "14 15 25 54 55 59 64 65 66 69 6A A5 A9 AA BA",
    "15 25 55 65 66 69 6A 7A A5 A6 A9 AA BA",
    "15 25 55 56 65 66 69 6A 7A A6 AA BA",
    "15 26 55 56 65 66 6A 6B 7A A6 AA AB BA BB",
    "14 15 25 54 55 59 64 65 69 6A 79 A9 AA BA",
    "15 25 55 59 65 66 69 6A 7A A9 AA BA",
    "15 25 55 56 59 5A 65 66 69 6A 7A AA BA",
    "15 55 56 5A 65 66 69 6A 6B 7A A6 AA AB BA BB",
    "14 15 29 54 55 59 65 68 69 6A 6D 79 A9 AA AE BA BE",
    "15 29 55 59 65 69 6A 6E 7A A9 AA AE BA BE",
    "15 55 59 5A 65 66 69 6A 6E 7A A9 AA AE BA BE",
    "15 55 56 59 5A 65 66 69 6A 6B 6E 7A AA AB AE BA BF",
    "45 51 54 55 56 59 65 95 96 99 9A A5 A6 A9 AA",
    "41 45 51 55 56 59 5A 65 66 95 96 99 9A A5 A6 AA",
    "41 45 51 55 56 5A 66 95 96 9A A6 AA",
    "41 45 46 51 52 55 56 5A 66 95 96 9A A6 AA AB",
    "44 45 54 55 56 59 5A 65 69 95 96 99 9A A5 A9 AA",
    "45 55 56 59 5A 65 6A 95 96 99 9A A6 A9 AA",
    "45 55 56 59 5A 66 6A 95 96 99 9A A6 AA AB",
    "45 46 55 56 5A 66 6A 96 9A 9B A6 AA AB",
    "44 45 54 55 59 5A 69 95 99 9A A9 AA",
    "45 55 56 59 5A 69 6A 95 96 99 9A A9 AA AE",
    "45 55 56 59 5A 6A 95 96 99 9A AA",
    "45 46 55 56 59 5A 6A 96 9A 9B AA AB",
    "44 45 49 54 55 58 59 5A 69 95 99 9A A9 AA AE",
    "45 49 55 59 5A 69 6A 99 9A 9E A9 AA AE",
    "45 49 55 56 59 5A 6A 99 9A 9E AA AE",
    "45 4A 55 56 59 5A 6A 9A 9B 9E AA AB AE AF",
    "50 51 54 55 56 59 65 66 69 95 96 99 A5 A6 A9 AA",
    "51 55 56 59 65 66 6A 95 96 9A A5 A6 A9 AA",
    "51 55 56 5A 65 66 6A 95 96 9A A5 A6 AA AB",
    "51 52 55 56 5A 66 6A 96 9A A6 A7 AA AB",
    "54 55 56 59 65 69 6A 95 99 9A A5 A6 A9 AA",
    "55 56 59 5A 65 66 69 6A 95 96 99 9A A5 A6 A9 AA",
    "15 45 51 55 56 59 5A 65 66 6A 95 96 9A A6 AA AB",
    "55 56 5A 66 6A 96 9A A6 AA AB",
    "54 55 59 5A 65 69 6A 95 99 9A A5 A9 AA AE",
    "15 45 54 55 56 59 5A 65 69 6A 95 99 9A A9 AA AE",
    "15 45 55 56 59 5A 65 66 69 6A 95 96 99 9A A6 A9 AA AB AE",
    "55 56 59 5A 66 6A 96 9A A6 AA AB",
    "54 55 58 59 5A 69 6A 99 9A A9 AA AD AE",
    "55 59 5A 69 6A 99 9A A9 AA AE",
    "55 56 59 5A 69 6A 99 9A A9 AA AE",
    "55 56 59 5A 6A 9A AA AB AE AF",
    "50 51 54 55 65 66 69 95 A5 A6 A9 AA",
    "51 55 56 65 66 69 6A 95 96 A5 A6 A9 AA BA",
    "51 55 56 65 66 6A 95 96 A5 A6 AA",
    "51 52 55 56 65 66 6A 96 A6 A7 AA AB",
    "54 55 59 65 66 69 6A 95 99 A5 A6 A9 AA BA",
    "15 51 54 55 56 59 65 66 69 6A 95 A5 A6 A9 AA BA",
    "15 51 55 56 59 5A 65 66 69 6A 95 96 9A A5 A6 A9 AA AB BA",
    "55 56 5A 65 66 6A 96 9A A6 AA AB",
    "54 55 59 65 69 6A 95 99 A5 A9 AA",
    "15 54 55 56 59 5A 65 66 69 6A 95 99 9A A5 A6 A9 AA AE BA",
    "15 55 56 59 5A 65 66 69 6A 9A A6 A9 AA",
    "15 55 56 59 5A 65 66 69 6A 96 9A A6 AA AB",
    "54 55 58 59 65 69 6A 99 A9 AA AD AE",
    "55 59 5A 65 69 6A 99 9A A9 AA AE",
    "15 55 56 59 5A 65 66 69 6A 99 9A A9 AA AE",
    "15 55 56 59 5A 66 69 6A 9A AA AB AE AF",
    "50 51 54 55 61 64 65 66 69 95 A5 A6 A9 AA BA",
    "51 55 61 65 66 69 6A A5 A6 A9 AA B6 BA",
    "51 55 56 61 65 66 6A A5 A6 AA B6 BA",
    "51 55 56 62 65 66 6A A6 A7 AA AB B6 BA BB",
    "54 55 64 65 66 69 6A A5 A6 A9 AA B9 BA",
    "55 65 66 69 6A A5 A6 A9 AA BA",
    "55 56 65 66 69 6A A5 A6 A9 AA BA",
    "55 56 65 66 6A A6 AA AB BA BB",
    "54 55 59 64 65 69 6A A5 A9 AA B9 BA",
    "55 59 65 66 69 6A A5 A6 A9 AA BA",
    "15 55 56 59 5A 65 66 69 6A A5 A6 A9 AA BA",
    "15 55 56 5A 65 66 69 6A A6 AA AB BA BB",
    "54 55 59 65 68 69 6A A9 AA AD AE B9 BA BE",
    "55 59 65 69 6A A9 AA AE BA BE",
    "15 55 59 5A 65 66 69 6A A9 AA AE BA BE",
    "55 56 59 5A 65 66 69 6A AA AB AE BA BF",
    "40 41 44 45 50 51 54 55 95 96 99 9A A5 A6 A9 AA",
    "41 45 51 55 56 95 96 99 9A A5 A6 AA",
    "41 45 51 55 56 95 96 9A A6 AA",
    "41 45 46 51 52 55 56 95 96 97 9A A6 AA AB",
    "44 45 54 55 59 95 96 99 9A A5 A9 AA",
    "45 55 56 59 5A 95 96 99 9A A5 A6 A9 AA EA",
    "45 55 56 59 5A 95 96 99 9A A6 AA",
    "45 46 55 56 5A 95 96 9A 9B A6 AA AB",
    "44 45 54 55 59 95 99 9A A9 AA",
    "45 55 56 59 5A 95 96 99 9A A9 AA",
    "45 55 56 59 5A 95 96 99 9A AA",
    "45 46 55 56 59 5A 95 96 99 9A 9B AA AB",
    "44 45 49 54 55 58 59 95 99 9A 9D A9 AA AE",
    "45 49 55 59 5A 95 99 9A 9E A9 AA AE",
    "45 49 55 56 59 5A 95 96 99 9A 9E AA AE",
    "45 55 56 59 5A 6A 96 99 9A 9B 9E AA AB AE AF",
    "50 51 54 55 65 95 96 99 A5 A6 A9 AA",
    "51 55 56 65 66 95 96 99 9A A5 A6 A9 AA EA",
    "51 55 56 65 66 95 96 9A A5 A6 AA",
    "51 52 55 56 66 95 96 9A A6 A7 AA AB",
    "54 55 59 65 69 95 96 99 9A A5 A6 A9 AA EA",
    "45 51 54 55 56 59 65 95 96 99 9A A5 A6 A9 AA EA",
    "45 51 55 56 59 5A 65 66 6A 95 96 99 9A A5 A6 A9 AA AB EA",
    "55 56 5A 66 6A 95 96 9A A6 AA AB",
    "54 55 59 65 69 95 99 9A A5 A9 AA",
    "45 54 55 56 59 5A 65 69 6A 95 96 99 9A A5 A6 A9 AA AE EA",
    "45 55 56 59 5A 6A 95 96 99 9A A6 A9 AA",
    "45 55 56 59 5A 66 6A 95 96 99 9A A6 AA AB",
    "54 55 58 59 69 95 99 9A A9 AA AD AE",
    "55 59 5A 69 6A 95 99 9A A9 AA AE",
    "45 55 56 59 5A 69 6A 95 96 99 9A A9 AA AE",
    "45 55 56 59 5A 6A 96 99 9A AA AB AE AF",
    "50 51 54 55 65 95 A5 A6 A9 AA",
    "51 55 56 65 66 95 96 A5 A6 A9 AA",
    "51 55 56 65 66 95 96 A5 A6 AA",
    "51 52 55 56 65 66 95 96 A5 A6 A7 AA AB",
    "54 55 59 65 69 95 99 A5 A6 A9 AA",
    "51 54 55 56 59 65 66 69 6A 95 96 99 9A A5 A6 A9 AA BA EA",
    "51 55 56 65 66 6A 95 96 9A A5 A6 A9 AA",
    "51 55 56 5A 65 66 6A 95 96 9A A5 A6 AA AB",
    "54 55 59 65 69 95 99 A5 A9 AA",
    "54 55 59 65 69 6A 95 99 9A A5 A6 A9 AA",
    "55 56 59 5A 65 66 69 6A 95 96 99 9A A5 A6 A9 AA",
    "55 56 59 5A 65 66 6A 95 96 9A A6 A9 AA AB",
    "54 55 58 59 65 69 95 99 A5 A9 AA AD AE",
    "54 55 59 5A 65 69 6A 95 99 9A A5 A9 AA AE",
    "55 56 59 5A 65 69 6A 95 99 9A A6 A9 AA AE",
    "55 56 59 5A 66 69 6A 96 99 9A A6 A9 AA AB AE AF",
    "50 51 54 55 61 64 65 95 A5 A6 A9 AA B5 BA",
    "51 55 61 65 66 95 A5 A6 A9 AA B6 BA",
    "51 55 56 61 65 66 95 96 A5 A6 AA B6 BA",
    "51 55 56 65 66 6A 96 A5 A6 A7 AA AB B6 BA BB",
    "54 55 64 65 69 95 A5 A6 A9 AA B9 BA",
    "55 65 66 69 6A 95 A5 A6 A9 AA BA",
    "51 55 56 65 66 69 6A 95 96 A5 A6 A9 AA BA",
    "51 55 56 65 66 6A 96 A5 A6 AA AB BA BB",
    "54 55 59 64 65 69 95 99 A5 A9 AA B9 BA",
    "54 55 59 65 66 69 6A 95 99 A5 A6 A9 AA BA",
    "55 56 59 65 66 69 6A 95 9A A5 A6 A9 AA BA",
    "55 56 5A 65 66 69 6A 96 9A A5 A6 A9 AA AB BA BB",
    "54 55 59 65 69 6A 99 A5 A9 AA AD AE B9 BA BE",
    "54 55 59 65 69 6A 99 A5 A9 AA AE BA BE",
    "55 59 5A 65 66 69 6A 99 9A A5 A6 A9 AA AE BA BE",
    "55 56 59 5A 65 66 69 6A 9A A6 A9 AA AB AE BA",
    "40 45 51 54 55 85 91 94 95 96 99 9A A5 A6 A9 AA EA",
    "41 45 51 55 56 85 91 95 96 99 9A A5 A6 AA EA",
    "41 45 51 55 56 85 91 95 96 9A A6 AA D6 EA",
    "41 45 51 55 56 86 92 95 96 97 9A A6 AA AB D6 EA EB",
    "44 45 54 55 59 85 94 95 96 99 9A A5 A9 AA EA",
    "45 55 85 95 96 99 9A A5 A6 A9 AA DA EA",
    "45 55 56 85 95 96 99 9A A6 AA DA EA",
    "45 55 56 86 95 96 9A 9B A6 AA AB DA EA EB",
    "44 45 54 55 59 85 94 95 99 9A A9 AA D9 EA",
    "45 55 59 85 95 96 99 9A A9 AA DA EA",
    "45 55 56 59 5A 85 95 96 99 9A AA DA EA",
    "45 55 56 5A 95 96 99 9A 9B A6 AA AB DA EA EB",
    "44 45 54 55 59 89 95 98 99 9A 9D A9 AA AE D9 EA EE",
    "45 55 59 89 95 99 9A 9E A9 AA AE DA EA EE",
    "45 55 59 5A 95 96 99 9A 9E A9 AA AE DA EA EE",
    "45 55 56 59 5A 95 96 99 9A 9B 9E AA AB AE DA EA EF",
    "50 51 54 55 65 91 94 95 96 99 A5 A6 A9 AA EA",
    "51 55 91 95 96 99 9A A5 A6 A9 AA E6 EA",
    "51 55 56 91 95 96 9A A5 A6 AA E6 EA",
    "51 55 56 92 95 96 9A A6 A7 AA AB E6 EA EB",
    "54 55 94 95 96 99 9A A5 A6 A9 AA E9 EA",
    "55 95 96 99 9A A5 A6 A9 AA EA",
    "55 56 95 96 99 9A A5 A6 A9 AA EA",
    "55 56 95 96 9A A6 AA AB EA EB",
    "54 55 59 94 95 99 9A A5 A9 AA E9 EA",
    "55 59 95 96 99 9A A5 A6 A9 AA EA",
    "45 55 56 59 5A 95 96 99 9A A5 A6 A9 AA EA",
    "45 55 56 5A 95 96 99 9A A6 AA AB EA EB",
    "54 55 59 95 98 99 9A A9 AA AD AE E9 EA EE",
    "55 59 95 99 9A A9 AA AE EA EE",
    "45 55 59 5A 95 96 99 9A A9 AA AE EA EE",
    "55 56 59 5A 95 96 99 9A AA AB AE EA EF",
    "50 51 54 55 65 91 94 95 A5 A6 A9 AA E5 EA",
    "51 55 65 91 95 96 A5 A6 A9 AA E6 EA",
    "51 55 56 65 66 91 95 96 A5 A6 AA E6 EA",
    "51 55 56 66 95 96 9A A5 A6 A7 AA AB E6 EA EB",
    "54 55 65 94 95 99 A5 A6 A9 AA E9 EA",
    "55 65 95 96 99 9A A5 A6 A9 AA EA",
    "51 55 56 65 66 95 96 99 9A A5 A6 A9 AA EA",
    "51 55 56 66 95 96 9A A5 A6 AA AB EA EB",
    "54 55 59 65 69 94 95 99 A5 A9 AA E9 EA",
    "54 55 59 65 69 95 96 99 9A A5 A6 A9 AA EA",
    "55 56 59 65 6A 95 96 99 9A A5 A6 A9 AA EA",
    "55 56 5A 66 6A 95 96 99 9A A5 A6 A9 AA AB EA EB",
    "54 55 59 69 95 99 9A A5 A9 AA AD AE E9 EA EE",
    "54 55 59 69 95 99 9A A5 A9 AA AE EA EE",
    "55 59 5A 69 6A 95 96 99 9A A5 A6 A9 AA AE EA EE",
    "55 56 59 5A 6A 95 96 99 9A A6 A9 AA AB AE EA",
    "50 51 54 55 65 95 A1 A4 A5 A6 A9 AA B5 BA E5 EA FA",
    "51 55 65 95 A1 A5 A6 A9 AA B6 BA E6 EA FA",
    "51 55 65 66 95 96 A5 A6 A9 AA B6 BA E6 EA FA",
    "51 55 56 65 66 95 96 A5 A6 A7 AA AB B6 BA E6 EA FB",
    "54 55 65 95 A4 A5 A6 A9 AA B9 BA E9 EA FA",
    "55 65 95 A5 A6 A9 AA BA EA FA",
    "51 55 65 66 95 96 A5 A6 A9 AA BA EA FA",
    "55 56 65 66 95 96 A5 A6 AA AB BA EA FB",
    "54 55 65 69 95 99 A5 A6 A9 AA B9 BA E9 EA FA",
    "54 55 65 69 95 99 A5 A6 A9 AA BA EA FA",
    "55 65 66 69 6A 95 96 99 9A A5 A6 A9 AA BA EA FA",
    "55 56 65 66 6A 95 96 9A A5 A6 A9 AA AB BA EA",
    "54 55 59 65 69 95 99 A5 A9 AA AD AE B9 BA E9 EA FE",
    "55 59 65 69 95 99 A5 A9 AA AE BA EA FE",
    "55 59 65 69 6A 95 99 9A A5 A6 A9 AA AE BA EA",
    "55 56 59 5A 65 66 69 6A 95 96 99 9A A5 A6 A9 AA AB AE BA EA",
)


def _decode(code: int) -> LatticePoint4D:
    """Turn a packed vertex byte into its lattice point."""
    return LatticePoint4D(
        (code & 3) - 1,
        ((code >> 2) & 3) - 1,
        ((code >> 4) & 3) - 1,
        ((code >> 6) & 3) - 1,
    )


@lru_cache(maxsize=None)
def lookup_4d() -> Tuple[Tuple[LatticePoint4D, ...], ...]:
    """Return the 256 per-sub-cell tuples of contributing 4D lattice points.

    The sub-cell index packs the quarter-cell position of each axis in two
    bits, x lowest and w highest.
    """
    if len(_ROWS) != len(_SIZES):
        raise ValueError("4D lookup rows and sizes disagree in count")
    grid = tuple(_decode(code) for code in range(256))
    table = []
    for index, (row, size) in enumerate(zip(_ROWS, _SIZES)):
        codes = bytes.fromhex(row)
        if len(codes) != size:
            raise ValueError(
                f"4D lookup row {index} holds {len(codes)} points, expected {size}")
        table.append(tuple(grid[code] for code in codes))
    return tuple(table)
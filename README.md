# supersimplex

Smooth OpenSimplex 2 ("SuperSimplex") gradient noise for Python, written
with the standard library alone.

- 2D noise is simplex noise with a larger kernel, evaluated from a lookup table.
- 3D noise is re-oriented 8-point BCC noise, built from two interleaved cubic
  lattices.
- 4D noise uses a pregenerated 4x4x4x4 lookup partitioning of the unit
  hypercube.

Each dimension comes in several orientations, so you can choose the one that
suits how your coordinates are laid out.

## Installation

```
pip install supersimplex
```

## Usage

```python
from supersimplex.noise import OpenSimplex2S

gen = OpenSimplex2S(seed=1234)
x, y, z, w, t = 0.1, 0.2, 0.3, 0.4, 2.5

# 2D
gen.noise2(x, y)
gen.noise2_x_before_y(x, y)        # Y runs down the main diagonal

# 3D
gen.noise3_classic(x, y, z)
gen.noise3_xy_before_z(x, y, t)    # terrain in X/Y, or animation over time t
gen.noise3_xz_before_y(x, y, z)    # terrain in X/Z with Y vertical

# 4D
gen.noise4_classic(x, y, z, w)
gen.noise4_xy_before_zw(x, y, z, w)
gen.noise4_xz_before_yw(x, y, z, w)
gen.noise4_xyz_before_w(x, y, z, t)  # animate a 3D texture over time t
```

`OpenSimplex2S(seed=0)` builds a permutation of 2048 entries from the seed,
which is taken as a signed 64-bit integer (larger values wrap). The same seed
always gives the same noise field. Every method returns a single float; the
values stay roughly within `[-1, 1]` and vary smoothly with the coordinates.

### Orientation guide

- `noise2_x_before_y`: Y points down the main diagonal; suits a 2D
  sandbox-style world where Y is vertical.
- `noise3_xy_before_z`: Z is the "different" axis. Use it for terrain where Z
  is vertical, or for animations where the third argument is time.
- `noise3_xz_before_y`: Y is the "different" axis. Use it for terrain where Y
  is vertical.
- `noise4_xy_before_zw` and `noise4_xz_before_yw`: two orthogonal
  triangular-based planes; the first suits the `noise(x, y, sin(t), cos(t))`
  pattern for looping animation.
- `noise4_xyz_before_w`: XYZ oriented like `noise3_classic`, with W as an
  extra degree of freedom such as time.

### Lower-level pieces

- `supersimplex.noise.fast_floor(x)` returns the largest integer not greater
  than `x`.
- `supersimplex.gradients` provides `gradients_2d()`, `gradients_3d()` and
  `gradients_4d()`, each a tuple of 2048 normalised gradient tuples, along
  with the constants `PSIZE` and `PMASK`.
- `supersimplex.lattice` provides the `LatticePoint2D`, `LatticePoint3D` and
  `LatticePoint4D` classes, `lookup_2d()` (32 points: four for each of eight
  regions) and `lookup_3d()` (the heads of eight per-octant decision chains;
  `LatticePoint3D.walk(in_range)` follows a chain).
- `supersimplex.lookup4d` provides `lookup_4d()`, 256 tuples of the 4D
  lattice points that can contribute in each sub-cell.

All tables are built on first use and cached.

## What this package does not do

It evaluates single noise samples and nothing more. It has no command-line
tool, does not write images or heightmaps, and offers no fractal layering
(octaves, persistence) or range remapping; build those on top of the noise
methods as your application needs.

## Running the tests

```
pip install -e ".[test]"
pytest
```
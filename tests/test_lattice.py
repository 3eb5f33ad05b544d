import pytest

from supersimplex.lattice import (
    LatticePoint2D,
    LatticePoint3D,
    LatticePoint4D,
    lookup_2d,
    lookup_3d,
)


def test_lookup_2d_has_32_entries():
    assert len(lookup_2d()) == 32


def test_lookup_2d_each_region_starts_with_origin_and_diagonal():
    table = lookup_2d()
    for start in range(0, 32, 4):
        assert (table[start].xsv, table[start].ysv) == (0, 0)
        assert (table[start + 1].xsv, table[start + 1].ysv) == (1, 1)


@pytest.mark.parametrize(
    "region, first, second",
    [
        (0, (-1, 0), (0, -1)),
        (2, (1, 0), (0, -1)),
        (4, (-1, 0), (0, 1)),
        (1, (0, 1), (1, 0)),
        (3, (2, 1), (1, 0)),
        (7, (2, 1), (1, 2)),
    ],
)
def test_lookup_2d_region_corners(region, first, second):
    table = lookup_2d()
    a = table[region * 4 + 2]
    b = table[region * 4 + 3]
    assert (a.xsv, a.ysv) == first
    assert (b.xsv, b.ysv) == second


def test_lattice_point_2d_origin_has_zero_displacement():
    point = LatticePoint2D(0, 0)
    assert point.dx == 0
    assert point.dy == 0


def test_lattice_point_2d_displacement_difference():
    for point in lookup_2d():
        assert point.dx - point.dy == pytest.approx(point.ysv - point.xsv)


def test_lattice_point_2d_is_immutable():
    point = LatticePoint2D(1, 1)
    with pytest.raises(AttributeError):
        point.xsv = 3
    assert point.xsv == 1
    assert point.ysv == 1


def test_lattice_point_4d_origin_has_zero_displacement():
    point = LatticePoint4D(0, 0, 0, 0)
    assert (point.dx, point.dy, point.dz, point.dw) == (0, 0, 0, 0)


def test_lattice_point_4d_symmetric_point_has_equal_components():
    point = LatticePoint4D(1, 1, 1, 1)
    assert point.dx == point.dy == point.dz == point.dw
    assert point.dx < 0


def test_lattice_point_4d_displacement_differences():
    point = LatticePoint4D(-1, 0, 1, 2)
    assert point.dx - point.dw == pytest.approx(3)
    assert point.dy - point.dz == pytest.approx(1)


def test_lattice_point_3d_second_lattice_is_shifted():
    point = LatticePoint3D(1, 0, 2, 1)
    assert (point.xrv, point.yrv, point.zrv) == (1025, 1024, 1026)
    assert (point.dxr, point.dyr, point.dzr) == (-0.5, 0.5, -1.5)


def test_lattice_point_3d_first_lattice_is_unshifted():
    point = LatticePoint3D(1, 0, 1, 0)
    assert (point.xrv, point.yrv, point.zrv) == (1, 0, 1)
    assert (point.dxr, point.dyr, point.dzr) == (-1, 0, -1)
    assert point.next_on_failure is None and point.next_on_success is None


def test_lookup_3d_heads_match_octant():
    heads = lookup_3d()
    assert len(heads) == 8
    for octant, head in enumerate(heads):
        bits = (octant & 1, (octant >> 1) & 1, (octant >> 2) & 1)
        assert (head.xrv, head.yrv, head.zrv) == bits
        assert (head.dxr, head.dyr, head.dzr) == tuple(-b for b in bits)


def test_lookup_3d_all_failure_chain_visits_fourteen_points():
    for head in lookup_3d():
        nodes = list(head.walk(lambda node: False))
        assert len(nodes) == 14
        assert len({id(n) for n in nodes}) == 14


def test_lookup_3d_all_success_chain_visits_eight_points():
    for head in lookup_3d():
        assert len(list(head.walk(lambda node: True))) == 8


def test_lookup_3d_half_lattice_consistency():
    for head in lookup_3d():
        for node in head.walk(lambda node: False):
            second = node.xrv >= 1024
            assert (node.yrv >= 1024) == second
            assert (node.zrv >= 1024) == second
            assert (node.dxr % 1 == 0.5) == second


def test_lookup_3d_second_node_is_on_second_lattice():
    for head in lookup_3d():
        second = head.next_on_success
        assert second is head.next_on_failure
        assert second.xrv >= 1024


def test_lookup_tables_are_cached():
    table_2d = lookup_2d()
    assert len(table_2d) == 32
    assert lookup_2d() is table_2d
    heads = lookup_3d()
    assert len(heads) == 8
    assert lookup_3d() is heads
    assert (heads[7].xrv, heads[7].yrv, heads[7].zrv) == (1, 1, 1)
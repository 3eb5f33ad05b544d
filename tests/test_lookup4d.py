from supersimplex.lattice import LatticePoint4D
from supersimplex.lookup4d import lookup_4d


def test_table_has_one_row_per_subcell():
    assert len(lookup_4d()) == 256


def test_table_is_cached():
    table = lookup_4d()
    assert len(table) == 256
    assert lookup_4d() is table
    assert lookup_4d()[0] == table[0]


def test_row_lengths_within_bounds():
    lengths = [len(row) for row in lookup_4d()]
    assert min(lengths) >= 10
    assert max(lengths) <= 20


def test_corner_rows_are_full():
    table = lookup_4d()
    assert len(table[0]) == 20
    assert len(table[255]) == 20


def test_first_point_of_first_row():
    assert lookup_4d()[0][0] == LatticePoint4D(0, 0, 0, -1)


def test_coordinates_in_range():
    allowed = {-1, 0, 1, 2}
    for row in lookup_4d():
        for point in row:
            assert {point.xsv, point.ysv, point.zsv, point.wsv} <= allowed


def test_rows_strictly_ordered_without_duplicates():
    for row in lookup_4d():
        keys = [(p.wsv, p.zsv, p.ysv, p.xsv) for p in row]
        assert all(a < b for a, b in zip(keys, keys[1:]))


def test_every_row_contains_cell_origin():
    origin = LatticePoint4D(0, 0, 0, 0)
    for row in lookup_4d():
        assert origin in row


def test_points_carry_consistent_displacements():
    for row in lookup_4d():
        for point in row:
            rebuilt = LatticePoint4D(point.xsv, point.ysv, point.zsv, point.wsv)
            assert (point.dx, point.dy, point.dz, point.dw) == (
                rebuilt.dx, rebuilt.dy, rebuilt.dz, rebuilt.dw)


def test_corner_rows_span_opposite_extremes():
    table = lookup_4d()
    assert LatticePoint4D(1, 1, 1, 1) in table[0]
    assert LatticePoint4D(0, 0, 0, 0) in table[255]
    assert table[0] != table[255]
"""Gradient tables for the SuperSimplex noise functions.

Each table holds ``PSIZE`` gradients. The base set repeats cyclically to fill
the table, and every component is divided by its dimension's normalisation
constant.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import cycle, islice
from typing import Sequence, Tuple

PSIZE = 2048
PMASK = 2047

N2 = 0.05481866495625118
N3 = 0.2781926117527186
N4 = 0.11127401889945551

Grad = Tuple[float, ...]

_GRAD2_BASE: Tuple[Grad, ...] = (
    (0.130526192220052, 0.99144486137381),
    (0.38268343236509, 0.923879532511287),
    (0.608761429008721, 0.793353340291235),
    (0.793353340291235, 0.608761429008721),
    (0.923879532511287, 0.38268343236509),
    (0.99144486137381, 0.130526192220051),
    (0.99144486137381, -0.130526192220051),
    (0.923879532511287, -0.38268343236509),
    (0.793353340291235, -0.60876142900872),
    (0.608761429008721, -0.793353340291235),
    (0.38268343236509, -0.923879532511287),
    (0.130526192220052, -0.99144486137381),
    (-0.130526192220052, -0.99144486137381),
    (-0.38268343236509, -0.923879532511287),
    (-0.608761429008721, -0.793353340291235),
    (-0.793353340291235, -0.608761429008721),
    (-0.923879532511287, -0.38268343236509),
    (-0.99144486137381, -0.130526192220052),
    (-0.99144486137381, 0.130526192220051),
    (-0.923879532511287, 0.38268343236509),
    (-0.793353340291235, 0.608761429008721),
    (-0.608761429008721, 0.793353340291235),
    (-0.38268343236509, 0.923879532511287),
    (-0.130526192220052, 0.99144486137381),
)

_GRAD3_BASE: Tuple[Grad, ...] = (
    (-2.22474487139, -2.22474487139, -1.0),
    (-2.22474487139, -2.22474487139, 1.0),
    (-3.0862664687972017, -1.1721513422464978, 0.0),
    (-1.1721513422464978, -3.0862664687972017, 0.0),
    (-2.22474487139, -1.0, -2.22474487139),
    (-2.22474487139, 1.0, -2.22474487139),
    (-1.1721513422464978, 0.0, -3.0862664687972017),
    (-3.0862664687972017, 0.0, -1.1721513422464978),
    (-2.22474487139, -1.0, 2.22474487139),
    (-2.22474487139, 1.0, 2.22474487139),
    (-3.0862664687972017, 0.0, 1.1721513422464978),
    (-1.1721513422464978, 0.0, 3.0862664687972017),
    (-2.22474487139, 2.22474487139, -1.0),
    (-2.22474487139, 2.22474487139, 1.0),
    (-1.1721513422464978, 3.0862664687972017, 0.0),
    (-3.0862664687972017, 1.1721513422464978, 0.0),
    (-1.0, -2.22474487139, -2.22474487139),
    (1.0, -2.22474487139, -2.22474487139),
    (0.0, -3.0862664687972017, -1.1721513422464978),
    (0.0, -1.1721513422464978, -3.0862664687972017),
    (-1.0, -2.22474487139, 2.22474487139),
    (1.0, -2.22474487139, 2.22474487139),
    (0.0, -1.1721513422464978, 3.0862664687972017),
    (0.0, -3.0862664687972017, 1.1721513422464978),
    (-1.0, 2.22474487139, -2.22474487139),
    (1.0, 2.22474487139, -2.22474487139),
    (0.0, 1.1721513422464978, -3.0862664687972017),
    (0.0, 3.0862664687972017, -1.1721513422464978),
    (-1.0, 2.22474487139, 2.22474487139),
    (1.0, 2.22474487139, 2.22474487139),
    (0.0, 3.0862664687972017, 1.1721513422464978),
    (0.0, 1.1721513422464978, 3.0862664687972017),
    (2.22474487139, -2.22474487139, -1.0),
    (2.22474487139, -2.22474487139, 1.0),
    (1.1721513422464978, -3.0862664687972017, 0.0),
    (3.0862664687972017, -1.1721513422464978, 0.0),
    (2.22474487139, -1.0, -2.22474487139),
    (2.22474487139, 1.0, -2.22474487139),
    (3.0862664687972017, 0.0, -1.1721513422464978),
    (1.1721513422464978, 0.0, -3.0862664687972017),
    (2.22474487139, -1.0, 2.22474487139),
    (2.22474487139, 1.0, 2.22474487139),
    (1.1721513422464978, 0.0, 3.0862664687972017),
    (3.0862664687972017, 0.0, 1.1721513422464978),
    (2.22474487139, 2.22474487139, -1.0),
    (2.22474487139, 2.22474487139, 1.0),
    (3.0862664687972017, 1.1721513422464978, 0.0),
    (1.1721513422464978, 3.0862664687972017, 0.0),
)

_GRAD4_BASE: Tuple[Grad, ...] = (
    (-0.753341017856078, -0.37968289875261624, -0.37968289875261624, -0.37968289875261624),
    (-0.7821684431180708, -0.4321472685365301, -0.4321472685365301, 0.12128480194602098),
    (-0.7821684431180708, -0.4321472685365301, 0.12128480194602098, -0.4321472685365301),
    (-0.7821684431180708, 0.12128480194602098, -0.4321472685365301, -0.4321472685365301),
    (-0.8586508742123365, -0.508629699630796, 0.044802370851755174, 0.044802370851755174),
    (-0.8586508742123365, 0.044802370851755174, -0.508629699630796, 0.044802370851755174),
    (-0.8586508742123365, 0.044802370851755174, 0.044802370851755174, -0.508629699630796),
    (-0.9982828964265062, -0.03381941603233842, -0.03381941603233842, -0.03381941603233842),
    (-0.37968289875261624, -0.753341017856078, -0.37968289875261624, -0.37968289875261624),
    (-0.4321472685365301, -0.7821684431180708, -0.4321472685365301, 0.12128480194602098),
    (-0.4321472685365301, -0.7821684431180708, 0.12128480194602098, -0.4321472685365301),
    (0.12128480194602098, -0.7821684431180708, -0.4321472685365301, -0.4321472685365301),
    (-0.508629699630796, -0.8586508742123365, 0.044802370851755174, 0.044802370851755174),
    (0.044802370851755174, -0.8586508742123365, -0.508629699630796, 0.044802370851755174),
    (0.044802370851755174, -0.8586508742123365, 0.044802370851755174, -0.508629699630796),
    (-0.03381941603233842, -0.9982828964265062, -0.03381941603233842, -0.03381941603233842),
    (-0.37968289875261624, -0.37968289875261624, -0.753341017856078, -0.37968289875261624),
    (-0.4321472685365301, -0.4321472685365301, -0.7821684431180708, 0.12128480194602098),
    (-0.4321472685365301, 0.12128480194602098, -0.7821684431180708, -0.4321472685365301),
    (0.12128480194602098, -0.4321472685365301, -0.7821684431180708, -0.4321472685365301),
    (-0.508629699630796, 0.044802370851755174, -0.8586508742123365, 0.044802370851755174),
    (0.044802370851755174, -0.508629699630796, -0.8586508742123365, 0.044802370851755174),
    (0.044802370851755174, 0.044802370851755174, -0.8586508742123365, -0.508629699630796),
    (-0.03381941603233842, -0.03381941603233842, -0.9982828964265062, -0.03381941603233842),
    (-0.37968289875261624, -0.37968289875261624, -0.37968289875261624, -0.753341017856078),
    (-0.4321472685365301, -0.4321472685365301, 0.12128480194602098, -0.7821684431180708),
    (-0.4321472685365301, 0.12128480194602098, -0.4321472685365301, -0.7821684431180708),
    (0.12128480194602098, -0.4321472685365301, -0.4321472685365301, -0.7821684431180708),
    (-0.508629699630796, 0.044802370851755174, 0.044802370851755174, -0.8586508742123365),
    (0.044802370851755174, -0.508629699630796, 0.044802370851755174, -0.8586508742123365),
    (0.044802370851755174, 0.044802370851755174, -0.508629699630796, -0.8586508742123365),
    (-0.03381941603233842, -0.03381941603233842, -0.03381941603233842, -0.9982828964265062),
    (-0.6740059517812944, -0.3239847771997537, -0.3239847771997537, 0.5794684678643381),
    (-0.7504883828755602, -0.4004672082940195, 0.15296486218853164, 0.5029860367700724),
    (-0.7504883828755602, 0.15296486218853164, -0.4004672082940195, 0.5029860367700724),
    (-0.8828161875373585, 0.08164729285680945, 0.08164729285680945, 0.4553054119602712),
    (-0.4553054119602712, -0.08164729285680945, -0.08164729285680945, 0.8828161875373585),
    (-0.5029860367700724, -0.15296486218853164, 0.4004672082940195, 0.7504883828755602),
    (-0.5029860367700724, 0.4004672082940195, -0.15296486218853164, 0.7504883828755602),
    (-0.5794684678643381, 0.3239847771997537, 0.3239847771997537, 0.6740059517812944),
    (-0.3239847771997537, -0.6740059517812944, -0.3239847771997537, 0.5794684678643381),
    (-0.4004672082940195, -0.7504883828755602, 0.15296486218853164, 0.5029860367700724),
    (0.15296486218853164, -0.7504883828755602, -0.4004672082940195, 0.5029860367700724),
    (0.08164729285680945, -0.8828161875373585, 0.08164729285680945, 0.4553054119602712),
    (-0.08164729285680945, -0.4553054119602712, -0.08164729285680945, 0.8828161875373585),
    (-0.15296486218853164, -0.5029860367700724, 0.4004672082940195, 0.7504883828755602),
    (0.4004672082940195, -0.5029860367700724, -0.15296486218853164, 0.7504883828755602),
    (0.3239847771997537, -0.5794684678643381, 0.3239847771997537, 0.6740059517812944),
    (-0.3239847771997537, -0.3239847771997537, -0.6740059517812944, 0.5794684678643381),
    (-0.4004672082940195, 0.15296486218853164, -0.7504883828755602, 0.5029860367700724),
    (0.15296486218853164, -0.4004672082940195, -0.7504883828755602, 0.5029860367700724),
    (0.08164729285680945, 0.08164729285680945, -0.8828161875373585, 0.4553054119602712),
    (-0.08164729285680945, -0.08164729285680945, -0.4553054119602712, 0.8828161875373585),
    (-0.15296486218853164, 0.4004672082940195, -0.5029860367700724, 0.7504883828755602),
    (0.4004672082940195, -0.15296486218853164, -0.5029860367700724, 0.7504883828755602),
    (0.3239847771997537, 0.3239847771997537, -0.5794684678643381, 0.6740059517812944),
    (-0.6740059517812944, -0.3239847771997537, 0.5794684678643381, -0.3239847771997537),
    (-0.7504883828755602, -0.4004672082940195, 0.5029860367700724, 0.15296486218853164),
    (-0.7504883828755602, 0.15296486218853164, 0.5029860367700724, -0.4004672082940195),
    (-0.8828161875373585, 0.08164729285680945, 0.4553054119602712, 0.08164729285680945),
    (-0.4553054119602712, -0.08164729285680945, 0.8828161875373585, -0.08164729285680945),
    (-0.5029860367700724, -0.15296486218853164, 0.7504883828755602, 0.4004672082940195),
    (-0.5029860367700724, 0.4004672082940195, 0.7504883828755602, -0.15296486218853164),
    (-0.5794684678643381, 0.3239847771997537, 0.6740059517812944, 0.3239847771997537),
    (-0.3239847771997537, -0.6740059517812944, 0.5794684678643381, -0.3239847771997537),
    (-0.4004672082940195, -0.7504883828755602, 0.5029860367700724, 0.15296486218853164),
    (0.15296486218853164, -0.7504883828755602, 0.5029860367700724, -0.4004672082940195),
    (0.08164729285680945, -0.8828161875373585, 0.4553054119602712, 0.08164729285680945),
    (-0.08164729285680945, -0.4553054119602712, 0.8828161875373585, -0.08164729285680945),
    (-0.15296486218853164, -0.5029860367700724, 0.7504883828755602, 0.4004672082940195),
    (0.4004672082940195, -0.5029860367700724, 0.7504883828755602, -0.15296486218853164),
    (0.3239847771997537, -0.5794684678643381, 0.6740059517812944, 0.3239847771997537),
    (-0.3239847771997537, -0.3239847771997537, 0.5794684678643381, -0.6740059517812944),
    (-0.4004672082940195, 0.15296486218853164, 0.5029860367700724, -0.7504883828755602),
    (0.15296486218853164, -0.4004672082940195, 0.5029860367700724, -0.7504883828755602),
    (0.08164729285680945, 0.08164729285680945, 0.4553054119602712, -0.8828161875373585),
    (-0.08164729285680945, -0.08164729285680945, 0.8828161875373585, -0.4553054119602712),
    (-0.15296486218853164, 0.4004672082940195, 0.7504883828755602, -0.5029860367700724),
    (0.4004672082940195, -0.15296486218853164, 0.7504883828755602, -0.5029860367700724),
    (0.3239847771997537, 0.3239847771997537, 0.6740059517812944, -0.5794684678643381),
    (-0.6740059517812944, 0.5794684678643381, -0.3239847771997537, -0.3239847771997537),
    (-0.7504883828755602, 0.5029860367700724, -0.4004672082940195, 0.15296486218853164),
    (-0.7504883828755602, 0.5029860367700724, 0.15296486218853164, -0.4004672082940195),
    (-0.8828161875373585, 0.4553054119602712, 0.08164729285680945, 0.08164729285680945),
    (-0.4553054119602712, 0.8828161875373585, -0.08164729285680945, -0.08164729285680945),
    (-0.5029860367700724, 0.7504883828755602, -0.15296486218853164, 0.4004672082940195),
    (-0.5029860367700724, 0.7504883828755602, 0.4004672082940195, -0.15296486218853164),
    (-0.5794684678643381, 0.6740059517812944, 0.3239847771997537, 0.3239847771997537),
    (-0.3239847771997537, 0.5794684678643381, -0.6740059517812944, -0.3239847771997537),
    (-0.4004672082940195, 0.5029860367700724, -0.7504883828755602, 0.15296486218853164),
    (0.15296486218853164, 0.5029860367700724, -0.7504883828755602, -0.4004672082940195),
    (0.08164729285680945, 0.4553054119602712, -0.8828161875373585, 0.08164729285680945),
    (-0.08164729285680945, 0.8828161875373585, -0.4553054119602712, -0.08164729285680945),
    (-0.15296486218853164, 0.7504883828755602, -0.5029860367700724, 0.4004672082940195),
    (0.4004672082940195, 0.7504883828755602, -0.5029860367700724, -0.15296486218853164),
    (0.3239847771997537, 0.6740059517812944, -0.5794684678643381, 0.3239847771997537),
    (-0.3239847771997537, 0.5794684678643381, -0.3239847771997537, -0.6740059517812944),
    (-0.4004672082940195, 0.5029860367700724, 0.15296486218853164, -0.7504883828755602),
    (0.15296486218853164, 0.5029860367700724, -0.4004672082940195, -0.7504883828755602),
    (0.08164729285680945, 0.4553054119602712, 0.08164729285680945, -0.8828161875373585),
    (-0.08164729285680945, 0.8828161875373585, -0.08164729285680945, -0.4553054119602712),
    (-0.15296486218853164, 0.7504883828755602, 0.4004672082940195, -0.5029860367700724),
    (0.4004672082940195, 0.7504883828755602, -0.15296486218853164, -0.5029860367700724),
    (0.3239847771997537, 0.6740059517812944, 0.3239847771997537, -0.5794684678643381),
    (0.5794684678643381, -0.6740059517812944, -0.3239847771997537, -0.3239847771997537),
    (0.5029860367700724, -0.7504883828755602, -0.4004672082940195, 0.15296486218853164),
    (0.5029860367700724, -0.7504883828755602, 0.15296486218853164, -0.4004672082940195),
    (0.4553054119602712, -0.8828161875373585, 0.08164729285680945, 0.08164729285680945),
    (0.8828161875373585, -0.4553054119602712, -0.08164729285680945, -0.08164729285680945),
    (0.7504883828755602, -0.5029860367700724, -0.15296486218853164, 0.4004672082940195),
    (0.7504883828755602, -0.5029860367700724, 0.4004672082940195, -0.15296486218853164),
    (0.6740059517812944, -0.5794684678643381, 0.3239847771997537, 0.3239847771997537),
    (0.5794684678643381, -0.3239847771997537, -0.6740059517812944, -0.3239847771997537),
    (0.5029860367700724, -0.4004672082940195, -0.7504883828755602, 0.15296486218853164),
    (0.5029860367700724, 0.15296486218853164, -0.7504883828755602, -0.4004672082940195),
    (0.4553054119602712, 0.08164729285680945, -0.8828161875373585, 0.08164729285680945),
    (0.8828161875373585, -0.08164729285680945, -0.4553054119602712, -0.08164729285680945),
    (0.7504883828755602, -0.15296486218853164, -0.5029860367700724, 0.4004672082940195),
    (0.7504883828755602, 0.4004672082940195, -0.5029860367700724, -0.15296486218853164),
    (0.6740059517812944, 0.3239847771997537, -0.5794684678643381, 0.3239847771997537),
    (0.5794684678643381, -0.3239847771997537, -0.3239847771997537, -0.6740059517812944),
    (0.5029860367700724, -0.4004672082940195, 0.15296486218853164, -0.7504883828755602),
    (0.5029860367700724, 0.15296486218853164, -0.4004672082940195, -0.7504883828755602),
    (0.4553054119602712, 0.08164729285680945, 0.08164729285680945, -0.8828161875373585),
    (0.8828161875373585, -0.08164729285680945, -0.08164729285680945, -0.4553054119602712),
    (0.7504883828755602, -0.15296486218853164, 0.4004672082940195, -0.5029860367700724),
    (0.7504883828755602, 0.4004672082940195, -0.15296486218853164, -0.5029860367700724),
    (0.6740059517812944, 0.3239847771997537, 0.3239847771997537, -0.5794684678643381),
    (0.03381941603233842, 0.03381941603233842, 0.03381941603233842, 0.9982828964265062),
    (-0.044802370851755174, -0.044802370851755174, 0.508629699630796, 0.8586508742123365),
    (-0.044802370851755174, 0.508629699630796, -0.044802370851755174, 0.8586508742123365),
    (-0.12128480194602098, 0.4321472685365301, 0.4321472685365301, 0.7821684431180708),
    (0.508629699630796, -0.044802370851755174, -0.044802370851755174, 0.8586508742123365),
    (0.4321472685365301, -0.12128480194602098, 0.4321472685365301, 0.7821684431180708),
    (0.4321472685365301, 0.4321472685365301, -0.12128480194602098, 0.7821684431180708),
    (0.37968289875261624, 0.37968289875261624, 0.37968289875261624, 0.753341017856078),
    (0.03381941603233842, 0.03381941603233842, 0.9982828964265062, 0.03381941603233842),
    (-0.044802370851755174, 0.044802370851755174, 0.8586508742123365, 0.508629699630796),
    (-0.044802370851755174, 0.508629699630796, 0.8586508742123365, -0.044802370851755174),
    (-0.12128480194602098, 0.4321472685365301, 0.7821684431180708, 0.4321472685365301),
    (0.508629699630796, -0.044802370851755174, 0.8586508742123365, -0.044802370851755174),
    (0.4321472685365301, -0.12128480194602098, 0.7821684431180708, 0.4321472685365301),
    (0.4321472685365301, 0.4321472685365301, 0.7821684431180708, -0.12128480194602098),
    (0.37968289875261624, 0.37968289875261624, 0.753341017856078, 0.37968289875261624),
    (0.03381941603233842, 0.9982828964265062, 0.03381941603233842, 0.03381941603233842),
    (-0.044802370851755174, 0.8586508742123365, -0.044802370851755174, 0.508629699630796),
    (-0.044802370851755174, 0.8586508742123365, 0.508629699630796, -0.044802370851755174),
    (-0.12128480194602098, 0.7821684431180708, 0.4321472685365301, 0.4321472685365301),
    (0.508629699630796, 0.8586508742123365, -0.044802370851755174, -0.044802370851755174),
    (0.4321472685365301, 0.7821684431180708, -0.12128480194602098, 0.4321472685365301),
    (0.4321472685365301, 0.7821684431180708, 0.4321472685365301, -0.12128480194602098),
    (0.37968289875261624, 0.753341017856078, 0.37968289875261624, 0.37968289875261624),
    (0.9982828964265062, 0.03381941603233842, 0.03381941603233842, 0.03381941603233842),
    (0.8586508742123365, -0.044802370851755174, -0.044802370851755174, 0.508629699630796),
    (0.8586508742123365, -0.044802370851755174, 0.508629699630796, -0.044802370851755174),
    (0.7821684431180708, -0.12128480194602098, 0.4321472685365301, 0.4321472685365301),
    (0.8586508742123365, 0.508629699630796, -0.044802370851755174, -0.044802370851755174),
    (0.7821684431180708, 0.4321472685365301, -0.12128480194602098, 0.4321472685365301),
    (0.7821684431180708, 0.4321472685365301, 0.4321472685365301, -0.12128480194602098),
    (0.753341017856078, 0.37968289875261624, 0.37968289875261624, 0.37968289875261624),
)


def _tile(base: Sequence[Grad], norm: float) -> Tuple[Grad, ...]:
    """Normalise ``base`` by ``norm`` and repeat it to fill ``PSIZE`` slots."""
    scaled = [tuple(component / norm for component in grad) for grad in base]
    return tuple(islice(cycle(scaled), PSIZE))


@lru_cache(maxsize=None)
def gradients_2d() -> Tuple[Grad, ...]:
    """Return the ``PSIZE`` normalised 2D gradients as ``(dx, dy)`` tuples."""
    return _tile(_GRAD2_BASE, N2)


@lru_cache(maxsize=None)
def gradients_3d() -> Tuple[Grad, ...]:
    """Return the ``PSIZE`` normalised 3D gradients as ``(dx, dy, dz)`` tuples."""
    return _tile(_GRAD3_BASE, N3)


@lru_cache(maxsize=None)
def gradients_4d() -> Tuple[Grad, ...]:
    """Return the ``PSIZE`` normalised 4D gradients as ``(dx, dy, dz, dw)`` tuples."""
    return _tile(_GRAD4_BASE, N4)
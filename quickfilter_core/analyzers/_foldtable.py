"""Quickfilter accent-folding table.

Built from the Unicode database of an earlier release; not generated
from the running interpreter.  scripts/mkfold.py regenerates the table
from the current ``unicodedata``, which also picks up marks assigned
since that release.

Each entry is ``(replacement, codes)``. ``codes`` starts with the first
code point folded to ``replacement``; every later entry is the delta
from the previous code point.  A negative entry ``-n`` repeats the
preceding delta so that its run is ``n`` long.
"""

FOLD_TABLE = (
    ("", (
        768, 1, -78, 2, 1, -31, 276, 1, -4, 266, 1, -44, 2, 2, 1, 2, 1, 2, 73,
        1, -10, 49, 1, -20, 17, 102, 1, -6, 3, 1, -5, 3, 1, 2, 1, -3, 36, 31,
        1, -26, 161, 1, -8, 35, 1, -3, 2, 1, -8, 2, 1, 1, 2, 1, -4, 44, 1, 1,
        137, 1, -26, 62, 17, 4, 1, -3, 104, 17, 111, 17, 111, 17, 111, 17,
        128, 128, 8, 1, 102, 17, 128, 125, 110, 1, 1, 14, 1, -3, 109, 1, 15,
        1, -3, 77, 1, 28, 2, 2, 56, 1, 2, 6, 1, -3, 3, 2, 1, 1, 2, 1, 63, 113,
        2, 1, 83, 720, 1, 1, 949, 32, 158, 11, 204, 144, 1, 1, 220, 1, 72, 21,
        1, -7, 3, 181, 16, 39, 1, -8, 55, 1, 59, 12, 1, 68, 153, 1, 1, 2, 1,
        -12, 2, 1, -6, 5, 7, 204, 1, -38, 22, 1, -3, 721, 1, -12, 5, 4, 1,
        -11, 3071, 1, 1, 142, 97, 1, -31, 555, 1, -5, 106, 1, 30165, 5, 1, -9,
        34, 81, 1, 277, 190, 28, 1, -17, 58, 1, 1, 38, 96, 13, 240, 2, 1, 1,
        3, 1, 6, 1, 2, 53, 247, 20273, 770, 1, -6,
    )),
    ("a", (
        170, 54, 1, -5, 28, 2, 2, 201, 17, 2, 26, 6, 2, 36, 6917, 23, 190,
        160, 2, -11, 473, 1088, 55921,
    )),
    ("b", (
        7470, 25, 188, 2, 2, 1738, 55921,
    )),
    ("c", (
        231, 32, 2, -3, 7311, 109, 884, 853, 55921,
    )),
    ("d", (
        271, 7201, 24, 195, 2, -4, 819, 56, 853, 55921,
    )),
    ("e", (
        232, 1, -3, 40, 2, -4, 234, 2, 34, 6920, 24, 204, 2, -4, 156, 2, -7,
        458, 158, 24, 909, 55921,
    )),
    ("f", (
        7584, 127, 1718, 55921,
    )),
    ("g", (
        285, 2, -3, 196, 14, 6974, 26, 212, 745, 972, 55921,
    )),
    ("h", (
        293, 250, 145, 6788, 239, 2, -4, 107, 511, 121, 969, 55921,
    )),
    ("i", (
        236, 1, -3, 58, 2, -3, 161, 57, 2, 6954, 45, 203, 2, 154, 2, 422, 200,
        15, 40, 872, 55921,
    )),
    ("j", (
        309, 187, 194, 6788, 1043, 912, 1955, 53966,
    )),
    ("k", (
        311, 178, 6990, 24, 226, 2, 2, 609, 1092, 55921,
    )),
    ("l", (
        314, 2, 2, 419, 6743, 255, 2, -3, 602, 124, 105, 863, 55921,
    )),
    ("m", (
        7481, 23, 239, 2, 2, 597, 231, 861, 55921,
    )),
    ("n", (
        241, 83, 2, 2, 177, 6977, 267, 2, -3, 564, 26, 1092, 55921,
    )),
    ("o", (
        186, 56, 1, -4, 87, 2, 2, 80, 49, 25, 2, 32, 2, 28, 2, -3, 6923, 22,
        251, 2, -3, 122, 2, -11, 431, 162, 938, 55921,
    )),
    ("p", (
        7486, 24, 255, 2, 579, 1093, 55921,
    )),
    ("q", (
        9440, 55921,
    )),
    ("r", (
        341, 2, 2, 184, 2, 160, 6796, 36, 246, 2, -3, 1666, 55921,
    )),
    ("s", (
        347, 2, -3, 30, 154, 201, 7039, 2, -4, 50, 512, 1095, 55921,
    )),
    ("t", (
        355, 2, 182, 6949, 23, 276, 2, -3, 38, 517, 1095, 55921,
    )),
    ("u", (
        249, 1, -3, 109, 2, -5, 61, 36, 2, -4, 57, 2, 6954, 23, 12, 271, 2,
        -4, 106, 2, -6, 1523, 55921,
    )),
    ("v", (
        7515, 10, 280, 2, 757, 881, 1944, 53977,
    )),
    ("w", (
        373, 322, 6795, 319, 2, -4, 15, 1614, 55921,
    )),
    ("x", (
        739, 7080, 2, 518, 230, 878, 55921,
    )),
    ("y", (
        253, 2, 120, 188, 133, 7127, 10, 90, 2, -3, 1519, 55921,
    )),
    ("z", (
        378, 2, 2, 7229, 214, 2, 2, 1620, 55921,
    )),
)

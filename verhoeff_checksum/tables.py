"""
The three Verhoeff tables.

These are the canonical published values and must never be edited or
computed at runtime: any other (even isomorphic) labelling produces check
digits that disagree with every external Verhoeff implementation.
``group.table_mismatches()`` re-derives them from D5 as a cross-check.
"""

from __future__ import annotations

# ─── Multiplication (Cayley table of D5) ─────────────────────────────
# Elements 0-4 are rotations, 5-9 reflections.

MULTIPLICATION_TABLE: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# ─── Permutation ─────────────────────────────────────────────────────
# Row i is sigma^i with sigma = (0 1 5 8 9 4 2 7)(3 6), selected by
# digit position mod 8.

PERMUTATION_TABLE: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)

# ─── Inverse ─────────────────────────────────────────────────────────

INVERSE_TABLE: tuple[int, ...] = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)

PERMUTATION_CYCLE = len(PERMUTATION_TABLE)

# Conventional short names
d = MULTIPLICATION_TABLE
p = PERMUTATION_TABLE
inv = INVERSE_TABLE

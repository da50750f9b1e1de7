"""
Derivation of the Verhoeff tables from the dihedral group D5.

D5 is the symmetry group of a regular pentagon. Each element is written as a
permutation of the five vertices (a 5-tuple ``e`` with ``e[x]`` the image of
vertex ``x``). Labelling:

  - 0-4: rotations  r^k,      r = (1, 2, 3, 4, 0)
  - 5-9: reflections r^k · s,  s = (0, 4, 3, 2, 1)

With ``compose(a, b)`` meaning "apply a, then b", the Cayley table under this
labelling is exactly the published multiplication table. The permutation
table is the powers of sigma = (0 1 5 8 9 4 2 7)(3 6) acting on digits, which
is unrelated to D5.

Nothing in the engine calls this module: the engine reads the literal tables.
This exists to prove those literals are what they claim to be.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import TableMismatch
from .tables import INVERSE_TABLE, MULTIPLICATION_TABLE, PERMUTATION_TABLE

Permutation = tuple[int, ...]

IDENTITY: Permutation = (0, 1, 2, 3, 4)
ROTATION: Permutation = (1, 2, 3, 4, 0)
REFLECTION: Permutation = (0, 4, 3, 2, 1)

# sigma in array form: SIGMA[x] is the image of digit x
SIGMA: Permutation = (1, 5, 7, 6, 2, 8, 3, 0, 9, 4)

PERMUTATION_ROWS = 8


@dataclass(frozen=True)
class DerivedTables:
    """The three tables as computed from the group structure."""

    d: tuple[tuple[int, ...], ...]
    p: tuple[tuple[int, ...], ...]
    inv: tuple[int, ...]


# ─── Group Operations ───────────────────────────────────────────────


def compose(a: Permutation, b: Permutation) -> Permutation:
    """Apply ``a`` first, then ``b``: h(x) = b(a(x))."""
    return tuple(b[a[x]] for x in range(len(a)))


def power(a: Permutation, exponent: int) -> Permutation:
    """``a`` composed with itself ``exponent`` times (square-and-multiply)."""
    if exponent < 0:
        raise ValueError(f"exponent must be >= 0, got {exponent}")
    result = tuple(range(len(a)))
    base = a
    while exponent > 0:
        if exponent % 2 == 1:
            result = compose(result, base)
        base = compose(base, base)
        exponent //= 2
    return result


def group_elements() -> list[Permutation]:
    """All ten elements of D5 in canonical label order."""
    rotations = [power(ROTATION, k) for k in range(5)]
    reflections = [compose(rotation, REFLECTION) for rotation in rotations]
    return rotations + reflections


# ─── Table Derivation ───────────────────────────────────────────────


def derive_tables() -> DerivedTables:
    """Build d, p and inv from first principles."""
    elements = group_elements()
    label = {element: index for index, element in enumerate(elements)}

    d = tuple(
        tuple(label[compose(a, b)] for b in elements)
        for a in elements
    )

    # Every row of a Cayley table contains the identity exactly once
    inv = tuple(row.index(0) for row in d)

    p_rows = [tuple(range(10))]
    while len(p_rows) < PERMUTATION_ROWS:
        p_rows.append(tuple(SIGMA[x] for x in p_rows[-1]))

    return DerivedTables(d=d, p=tuple(p_rows), inv=inv)


def table_mismatches(derived: DerivedTables | None = None) -> list[TableMismatch]:
    """Compare derived tables against the published constants, cell by cell.

    Args:
        derived: Tables to check. Defaults to a fresh ``derive_tables()``.

    Returns:
        One TableMismatch per differing cell; empty when everything agrees.
    """
    if derived is None:
        derived = derive_tables()

    mismatches: list[TableMismatch] = []
    mismatches.extend(_compare_grid("d", MULTIPLICATION_TABLE, derived.d))
    mismatches.extend(_compare_grid("p", PERMUTATION_TABLE, derived.p))

    for row, (expected, actual) in enumerate(zip(INVERSE_TABLE, derived.inv)):
        if expected != actual:
            mismatches.append(
                TableMismatch(table="inv", row=row, expected=expected, actual=actual)
            )

    return mismatches


def _compare_grid(
    name: str,
    expected: tuple[tuple[int, ...], ...],
    actual: tuple[tuple[int, ...], ...],
) -> list[TableMismatch]:
    if len(expected) != len(actual):
        raise ValueError(
            f"Table {name!r} has {len(actual)} rows, expected {len(expected)}"
        )

    mismatches: list[TableMismatch] = []
    for row, (expected_row, actual_row) in enumerate(zip(expected, actual)):
        for column, (want, got) in enumerate(zip(expected_row, actual_row)):
            if want != got:
                mismatches.append(
                    TableMismatch(
                        table=name, row=row, column=column, expected=want, actual=got
                    )
                )
    return mismatches

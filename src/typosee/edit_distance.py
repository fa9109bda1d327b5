from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .errors import ScriptAllocationError, TableAllocationError


Op = Literal["match", "sub", "ins", "del"]
Index = tuple[int, int]


@dataclass(frozen=True)
class Cell:
    score: int
    op: Op
    source: Optional[str] = None
    target: Optional[str] = None
    position: int = 0
    prev: Optional[Index] = None


@dataclass(frozen=True)
class EditOp:
    op: Op
    source: Optional[str] = None
    target: Optional[str] = None
    position: int = 0


@dataclass
class Table:
    a: str
    b: str
    cells: list[list[Cell]]

    @property
    def distance(self) -> int:
        return self.cells[len(self.a)][len(self.b)].score


def _allocate_grid(rows: int, cols: int) -> list[list[Optional[Cell]]]:
    return [[None] * cols for _ in range(rows)]


def build_table(a: str, b: str) -> Table:
    """
    Fill the Wagner-Fischer table for `a` -> `b`, recording per-cell provenance.

    Ties prefer deletion, then insertion, then substitution. Border cells have
    no predecessor but still record the deletion/insertion they stand for.
    """
    n = len(a)
    m = len(b)
    try:
        grid = _allocate_grid(n + 1, m + 1)

        grid[0][0] = Cell(0, "match")
        for i in range(1, n + 1):
            grid[i][0] = Cell(i, "del", source=a[i - 1], position=i - 1)
        for j in range(1, m + 1):
            grid[0][j] = Cell(j, "ins", target=b[j - 1], position=0)

        for j in range(1, m + 1):
            for i in range(1, n + 1):
                cost_sub = 0 if a[i - 1] == b[j - 1] else 1
                dele = grid[i - 1][j].score + 1  # type: ignore[union-attr]
                ins = grid[i][j - 1].score + 1  # type: ignore[union-attr]
                sub = grid[i - 1][j - 1].score + cost_sub  # type: ignore[union-attr]
                best = min(dele, ins, sub)
                source: Optional[str] = a[i - 1]
                target: Optional[str] = b[j - 1]
                if best == dele:
                    op: Op = "del"
                    prev = (i - 1, j)
                    target = None
                elif best == ins:
                    op = "ins"
                    prev = (i, j - 1)
                    source = None
                else:
                    op = "match" if cost_sub == 0 else "sub"
                    prev = (i - 1, j - 1)
                grid[i][j] = Cell(best, op, source=source, target=target, position=i - 1, prev=prev)
    except MemoryError as e:
        raise TableAllocationError(f"could not allocate {n + 1}x{m + 1} distance table") from e

    return Table(a=a, b=b, cells=grid)  # type: ignore[arg-type]


def reconstruct(table: Table) -> list[EditOp]:
    """
    Backtrace from the final cell to the origin and return the edits in
    application order (ascending position). `match` cells are skipped, so the
    result length equals `table.distance`.
    """
    ops: list[EditOp] = []
    i, j = len(table.a), len(table.b)
    try:
        while i > 0 or j > 0:
            cell = table.cells[i][j]
            if cell.op != "match":
                ops.append(EditOp(cell.op, source=cell.source, target=cell.target, position=cell.position))
            if cell.prev is not None:
                i, j = cell.prev
            elif i > 0:
                # Column 0: the rest of `a` is deleted.
                i -= 1
            else:
                j -= 1
        ops.reverse()
    except MemoryError as e:
        raise ScriptAllocationError("could not allocate edit script") from e
    return ops


def levenshtein(a: str, b: str) -> tuple[int, list[EditOp]]:
    table = build_table(a, b)
    ops = reconstruct(table)
    distance = table.distance
    del table
    return distance, ops


def levenshtein_distance(a: str, b: str) -> int:
    return build_table(a, b).distance


def edit_counts(ops: list[EditOp]) -> tuple[int, int, int]:
    subs = sum(1 for o in ops if o.op == "sub")
    ins = sum(1 for o in ops if o.op == "ins")
    dels = sum(1 for o in ops if o.op == "del")
    return subs, ins, dels

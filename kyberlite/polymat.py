"""Matrices whose entries are polynomials."""

from collections.abc import Iterator

from .poly import Poly


class PolyMat:
    """A rows x cols matrix of :class:`Poly` entries.

    Entries are stored by value: assigning a polynomial stores a copy, while
    reading one returns the stored object so that it can be filled in place.
    """

    __slots__ = ("_grid", "_rows", "_cols")

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._grid = [[Poly() for _ in range(cols)] for _ in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @staticmethod
    def _locate(key: tuple[int, int]) -> tuple[int, int]:
        r, c = key
        if r < 0 or c < 0:
            raise IndexError(f"negative matrix index {key}")
        return r, c

    def __getitem__(self, key: tuple[int, int]) -> Poly:
        r, c = self._locate(key)
        if r >= self._rows or c >= self._cols:
            raise IndexError(f"index {key} outside a {self._rows}x{self._cols} matrix")
        return self._grid[r][c]

    def __setitem__(self, key: tuple[int, int], value: Poly) -> None:
        r, c = self._locate(key)
        if not (r < self._rows and c < self._cols):
            self.reserve(r + 1, c + 1)
        self._grid[r][c] = value.copy()

    def __iter__(self) -> Iterator[list[Poly]]:
        return iter(self._grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolyMat):
            return NotImplemented
        return (self._rows, self._cols) == (other._rows, other._cols) and self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PolyMat({self._rows}x{self._cols})"

    def copy(self) -> "PolyMat":
        result = PolyMat()
        result._rows, result._cols = self._rows, self._cols
        result._grid = [[p.copy() for p in row] for row in self._grid]
        return result

    def reserve(self, rows: int, cols: int) -> None:
        """Resize to exactly ``rows`` x ``cols`` unless both already exceed them.

        Entries inside the new shape are kept; new places hold empty polynomials.
        """
        if rows < self._rows and cols < self._cols:
            return
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        self._grid = [
            [
                self._grid[i][j] if i < self._rows and j < self._cols else Poly()
                for j in range(cols)
            ]
            for i in range(rows)
        ]
        self._rows, self._cols = rows, cols

    def transpose(self) -> "PolyMat":
        """Return a new matrix that is the transpose of this one."""
        result = PolyMat()
        result._rows, result._cols = self._cols, self._rows
        result._grid = [[row[j].copy() for row in self._grid] for j in range(self._cols)]
        return result

    def __iadd__(self, other: "PolyMat") -> "PolyMat":
        if not isinstance(other, PolyMat):
            return NotImplemented
        if other._rows > self._rows or other._cols > self._cols:
            self.reserve(other._rows, other._cols)
        for mine, theirs in zip(self._grid, other._grid):
            for j, p in enumerate(theirs):
                mine[j] += p
        return self

    def __add__(self, other: "PolyMat") -> "PolyMat":
        if not isinstance(other, PolyMat):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __mul__(self, other: "PolyMat") -> "PolyMat":
        if not isinstance(other, PolyMat):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError(
                f"cannot multiply {self._rows}x{self._cols} by {other._rows}x{other._cols}"
            )
        result = PolyMat(self._rows, other._cols)
        for i, row in enumerate(self._grid):
            for j in range(other._cols):
                total = Poly()
                for k, p in enumerate(row):
                    total += p * other._grid[k][j]
                result._grid[i][j] = total
        return result

    def format(self) -> str:
        """Render as ``[[p00,p01],[p10,p11]]`` with space-separated coefficients."""
        body = ",".join("[" + ",".join(p.format() for p in row) + "]" for row in self._grid)
        return "[" + body + "]"
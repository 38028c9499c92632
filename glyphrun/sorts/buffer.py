"""Gap buffer of sorts.

The store is one contiguous list with an empty window (the gap) kept at the
edit position::

    [ sorts before gap ][ gap ][ sorts after gap ]
    0              gap_start   gap_end          capacity

Inserting or deleting at the gap is O(1). Moving the gap costs time
proportional to the distance moved, so sustained typing at a stable cursor
is amortized O(1) per character. When the gap is exhausted the store
doubles.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from glyphrun.sorts.data import Sort

DEFAULT_GAP_SIZE = 16
MIN_GAP_SIZE = 16


class SortBuffer:
    """Editable, cursor-addressable sequence of sorts."""

    def __init__(self, initial_gap_size: int = DEFAULT_GAP_SIZE) -> None:
        size = max(1, initial_gap_size)
        self._store: list[Sort | None] = [None] * size
        self._gap_start = 0
        self._gap_end = size
        self._cursor = 0

    @classmethod
    def from_sorts(cls, sorts: list[Sort], initial_gap_size: int = DEFAULT_GAP_SIZE) -> SortBuffer:
        buffer = cls(initial_gap_size)
        for sort in sorts:
            buffer.insert(sort)
        return buffer

    def __len__(self) -> int:
        return len(self._store) - self._gap_size

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[Sort]:
        return self.iterate()

    def __getitem__(self, index: int) -> Sort:
        sort = self.get(index)
        if sort is None:
            raise IndexError(f"sort index out of range: {index}")
        return sort

    def __repr__(self) -> str:
        return f"SortBuffer(len={len(self)}, cursor={self._cursor})"

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def capacity(self) -> int:
        return len(self._store)

    @property
    def _gap_size(self) -> int:
        return self._gap_end - self._gap_start

    def _physical(self, index: int) -> int:
        if index < self._gap_start:
            return index
        return index + self._gap_size

    def _move_gap_to(self, position: int) -> None:
        if position == self._gap_start:
            return
        store = self._store
        if position < self._gap_start:
            count = self._gap_start - position
            new_end = self._gap_end - count
            store[new_end:self._gap_end] = store[position:self._gap_start]
        else:
            count = position - self._gap_start
            new_end = self._gap_end + count
            store[self._gap_start:position] = store[self._gap_end:new_end]
        # Source and destination may overlap; only the new gap is cleared.
        store[position:new_end] = [None] * (new_end - position)
        self._gap_start = position
        self._gap_end = new_end

    def _grow(self) -> None:
        old_capacity = len(self._store)
        new_capacity = max(old_capacity * 2, MIN_GAP_SIZE)
        extra = new_capacity - old_capacity
        tail = self._store[self._gap_end:]
        self._store = (
            self._store[:self._gap_start]
            + [None] * (self._gap_size + extra)
            + tail
        )
        self._gap_end += extra

    # Editing

    def insert(self, sort: Sort) -> None:
        """Insert ``sort`` before the cursor and move the cursor past it."""
        if self._gap_size == 0:
            self._grow()
        self._move_gap_to(self._cursor)
        self._store[self._gap_start] = sort
        self._gap_start += 1
        self._cursor += 1

    def delete_before(self) -> Sort | None:
        """Remove the sort before the cursor (backspace)."""
        if self._cursor == 0:
            return None
        self._move_gap_to(self._cursor)
        self._gap_start -= 1
        self._cursor -= 1
        deleted = self._store[self._gap_start]
        self._store[self._gap_start] = None
        return deleted

    def delete_after(self) -> Sort | None:
        """Remove the sort after the cursor (forward delete)."""
        if self._cursor >= len(self):
            return None
        self._move_gap_to(self._cursor)
        deleted = self._store[self._gap_end]
        self._store[self._gap_end] = None
        self._gap_end += 1
        return deleted

    def replace(self, index: int, sort: Sort) -> bool:
        """Swap the sort at ``index`` in place; False if out of range."""
        if not 0 <= index < len(self):
            return False
        self._store[self._physical(index)] = sort
        return True

    def clear(self) -> None:
        self._store = [None] * len(self._store)
        self._gap_start = 0
        self._gap_end = len(self._store)
        self._cursor = 0

    # Cursor

    def move_cursor(self, delta: int) -> int:
        """Move the cursor by ``delta``, clamped to ``[0, len]``."""
        return self.set_cursor(self._cursor + delta)

    def set_cursor(self, position: int) -> int:
        self._cursor = max(0, min(position, len(self)))
        return self._cursor

    # Access

    def get(self, index: int) -> Sort | None:
        if not 0 <= index < len(self):
            return None
        return self._store[self._physical(index)]

    def iterate(self) -> Iterator[Sort]:
        """Yield sorts in logical order, skipping the gap."""
        store = self._store
        for i in range(self._gap_start):
            yield store[i]
        for i in range(self._gap_end, len(store)):
            yield store[i]

    def codepoints(self) -> list[str]:
        """Shaping context aligned with buffer indices."""
        return [sort.context_char for sort in self.iterate()]

    def context(self) -> ShapingContext:
        """Live, indexable view of ``codepoints()`` without copying."""
        return ShapingContext(self)

    # Active sort

    def set_active(self, index: int) -> bool:
        """Make ``index`` the only active sort; False if out of range."""
        self.clear_active()
        sort = self.get(index)
        if sort is None:
            return False
        sort.is_active = True
        return True

    def clear_active(self) -> None:
        for sort in self.iterate():
            sort.is_active = False

    def find_active(self) -> int | None:
        for index, sort in enumerate(self.iterate()):
            if sort.is_active:
                return index
        return None

    def active_sort(self) -> Sort | None:
        index = self.find_active()
        if index is None:
            return None
        return self.get(index)


class ShapingContext(Sequence[str]):
    """Read-only character view over a SortBuffer.

    Reshaping only looks at a few neighbours of the edit position, so
    indexing reads the buffer directly instead of building the whole text.
    """

    def __init__(self, buffer: SortBuffer) -> None:
        self._buffer = buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index: int | slice) -> str | list[str]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        return self._buffer[index].context_char

import argparse
import logging
from typing import Dict, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)


class DuplicateValueError(KeyError):
    """Raised when a value already present in the heap is inserted again."""


class IndexedMinHeap:
    """
    A binary min-heap of integers that can remove any value in O(log n).

    Alongside the usual array of items, the heap keeps a map from each
    value to its current slot. Every primitive that moves an item also
    updates that map, so a value can be located without scanning.

    Attributes:
        items (list[int]):
            The heap array. items[i] <= items[2i+1] and items[2i+2].
        index (dict[int, int]):
            Mapping from each stored value to its slot in items.
    """

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        """
        Create an empty heap, or one seeded from unique values.

        Args:
            values: Optional iterable of unique integers to start with.

        Raises:
            DuplicateValueError: If values contains the same integer twice.
        """
        self.items: List[int] = []
        self.index: Dict[int, int] = {}
        if values is not None:
            for value in values:
                if value in self.index:
                    raise DuplicateValueError(value)
                self._push(value)
            self.init()

    # -------------------------------------------------------------
    # Heap primitives (all keep index in sync)
    # -------------------------------------------------------------

    def _less(self, i: int, j: int) -> bool:
        return self.items[i] < self.items[j]

    def _swap(self, i: int, j: int) -> None:
        items = self.items
        items[i], items[j] = items[j], items[i]
        self.index[items[i]] = i
        self.index[items[j]] = j

    def _push(self, value: int) -> None:
        self.index[value] = len(self.items)
        self.items.append(value)

    def _pop(self) -> int:
        value = self.items.pop()
        del self.index[value]
        return value

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> bool:
        """Move slot i down; return True if the item moved."""
        n = len(self.items)
        start = i
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            smallest = left
            right = left + 1
            if right < n and self._less(right, left):
                smallest = right
            if not self._less(smallest, i):
                break
            self._swap(i, smallest)
            i = smallest
        return i > start

    def _fix(self, i: int) -> None:
        # The value at i may be smaller than its parent or larger than a
        # child, never both.
        if not self._sift_down(i):
            self._sift_up(i)

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def init(self) -> None:
        """Restore heap order over the current items (bottom-up heapify)."""
        for i in reversed(range(len(self.items) // 2)):
            self._sift_down(i)
        logger.debug("heapified %d items", len(self.items))

    def insert(self, value: int) -> None:
        """
        Insert a value into the heap.

        Args:
            value (int): The value to insert. Must not already be present.

        Raises:
            DuplicateValueError: If value is already in the heap.
        """
        if value in self.index:
            raise DuplicateValueError(value)
        self._push(value)
        self._sift_up(len(self.items) - 1)
        logger.debug("inserted %d at slot %d", value, self.index[value])

    def get_min(self) -> int:
        """
        Return the smallest value without removing it.

        Returns:
            int: The root of the heap.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self.items:
            raise IndexError("get_min from empty heap")
        return self.items[0]

    def remove(self, value: int) -> bool:
        """
        Remove an arbitrary value from the heap.

        Args:
            value (int): The value to remove.

        Returns:
            bool: True if the value was removed,
                  False if it was not present.
        """
        i = self.index.get(value)
        if i is None:
            return False

        last = len(self.items) - 1
        self._swap(i, last)
        self._pop()
        if i < len(self.items):
            self._fix(i)
        logger.debug("removed %d from slot %d", value, i)
        return True

    # -------------------------------------------------------------
    # Additional Functionalities
    # -------------------------------------------------------------

    def pop_min(self) -> int:
        """
        Remove and return the smallest value.

        Raises:
            IndexError: If the heap is empty.
        """
        value = self.get_min()
        self.remove(value)
        return value

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, value) -> bool:
        return value in self.index

    def __iter__(self) -> Iterator[int]:
        """Iterate over the stored values in heap-array order (not sorted)."""
        return iter(list(self.items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items!r})"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Indexed min-heap demo")
    parser.add_argument(
        "values", nargs="*", type=int, default=[5, 3, 8], help="Values to insert (default: 5 3 8)"
    )
    parser.add_argument(
        "--remove", nargs="*", type=int, default=[3], help="Values to remove afterwards (default: 3)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log heap mutations")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-6s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    h = IndexedMinHeap()
    h.init()
    for value in args.values:
        try:
            h.insert(value)
        except DuplicateValueError:
            print(f"Rejected: {value} is already in the heap")
    if h:
        print("Min:", h.get_min())

    for value in args.remove:
        removed = h.remove(value)
        if not removed:
            print(f"{value} not in heap")
        elif h:
            print(f"Min after removing {value}:", h.get_min())
        else:
            print(f"Heap empty after removing {value}")


# --- Usage Example ---
if __name__ == "__main__":
    main()

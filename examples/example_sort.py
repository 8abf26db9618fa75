# example_sort.py
from __future__ import annotations

from linsort import ExtendedCountingSort, Tagged, checked, extended_counting_sort

if __name__ == "__main__":
    xs = [5, 3, 5, 1, 4]
    extended_counting_sort(xs)
    print(xs)  # [1, 3, 4, 5, 5]

    # Only positions 1..3 move.
    ys = [9, 8, 7, 6, 5]
    ExtendedCountingSort().sort(ys, 1, 3)
    print(ys)  # [9, 6, 7, 8, 5]

    # Tags make stability visible; checked() asserts it on every call.
    tagged = [Tagged(5, "a"), Tagged(3, "b"), Tagged(5, "c"), Tagged(1, "d"), Tagged(4, "e")]
    checked(ExtendedCountingSort()).sort(tagged, 0, 4)
    print([t.tag for t in tagged])  # ['d', 'b', 'e', 'a', 'c']

"""Pure functions over cart lines. No I/O, never fail."""

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import replace
from decimal import Decimal

from storefront_client.core.domain.cart.cart_line import CartLine, LineKey


def compute_total(lines: Iterable[CartLine]) -> Decimal:
    return sum((line.subtotal for line in lines), Decimal("0"))


def merge_line(lines: Sequence[CartLine], candidate: CartLine) -> tuple[CartLine, ...]:
    """Return a new sequence with ``candidate`` merged in by line key.

    An existing line keeps its position and takes the candidate's quantity
    (replaced, not summed: the remote cart is authoritative). Unknown keys are
    appended.
    """
    merged: list[CartLine] = []
    found = False
    for line in lines:
        if line.key == candidate.key:
            merged.append(replace(line, quantity=candidate.quantity))
            found = True
        else:
            merged.append(line)
    if not found:
        merged.append(candidate)
    return tuple(merged)


def find_duplicate_keys(lines: Iterable[CartLine]) -> set[LineKey]:
    counts = Counter(line.key for line in lines)
    return {key for key, count in counts.items() if count > 1}

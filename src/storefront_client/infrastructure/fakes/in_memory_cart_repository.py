import asyncio
import itertools
from collections import Counter, defaultdict, deque
from collections.abc import Iterable
from dataclasses import replace

from storefront_client.core.application.exceptions import (
    CartAddError,
    CartRemoveError,
    CartUpdateError,
    InvalidVariantError,
    StorefrontError,
)
from storefront_client.core.application.ports import CartRepositoryPort
from storefront_client.core.domain.cart import CartLine, CartSnapshot, merge_line
from storefront_client.core.domain.catalog import Product, check_completeness


class InMemoryCartRepository(CartRepositoryPort):
    """
    Server-side cart kept in memory, for tests and local runs.

    Adding an existing (product, size, color) increments that line, like the
    storefront API. Fetches read the state when they start, then wait on
    ``fetch_gate`` if one is set, so tests can hold a response in flight.
    """

    def __init__(self, products: Iterable[Product] = (), lines: Iterable[CartLine] = ()) -> None:
        self.products = {product.product_id: product for product in products}
        self.lines: tuple[CartLine, ...] = tuple(lines)
        self.calls: Counter[str] = Counter()
        self.fetch_gate: asyncio.Event | None = None
        self.scripted_snapshots: deque[CartSnapshot] = deque()
        self._failures: dict[str, list[StorefrontError]] = defaultdict(list)
        self._ids = itertools.count(len(self.lines) + 1)

    # ── Test controls ──

    def fail_next(self, operation: str, error: StorefrontError) -> None:
        """Queue ``error`` for the next call to ``operation`` (method name)."""
        self._failures[operation].append(error)

    def script_snapshot(self, snapshot: CartSnapshot) -> None:
        """Serve ``snapshot`` verbatim on the next fetch, bypassing the stored lines."""
        self.scripted_snapshots.append(snapshot)

    @property
    def network_calls(self) -> int:
        return sum(self.calls.values())

    # ── CartRepositoryPort ──

    async def fetch_cart(self) -> CartSnapshot:
        self._enter("fetch_cart")
        if self.scripted_snapshots:
            snapshot = self.scripted_snapshots.popleft()
        else:
            snapshot = CartSnapshot.from_lines(self.lines)
        await asyncio.sleep(0)
        if self.fetch_gate is not None:
            await self.fetch_gate.wait()
        return snapshot

    async def add_item(self, product_id: str, size: str, color: str, quantity: int = 1) -> None:
        selection = check_completeness(size, color)
        if not selection.is_valid:
            raise InvalidVariantError(selection)
        self._enter("add_item")
        await asyncio.sleep(0)
        product = self.products.get(product_id)
        if product is None:
            raise CartAddError(message=f"Unknown product {product_id}", status_code=404)
        candidate = CartLine(f"line-{next(self._ids)}", product, selection.size, selection.color, quantity)
        existing = next((line for line in self.lines if line.key == candidate.key), None)
        if existing is not None:
            candidate = replace(existing, quantity=existing.quantity + quantity)
        self.lines = merge_line(self.lines, candidate)

    async def set_quantity(self, line_id: str, quantity: int) -> None:
        self._enter("set_quantity")
        await asyncio.sleep(0)
        if quantity < 1:
            raise CartUpdateError(message="Quantity must be at least 1", status_code=400)
        self._require(line_id, CartUpdateError)
        self.lines = tuple(
            replace(line, quantity=quantity) if line.line_id == line_id else line
            for line in self.lines
        )

    async def remove_item(self, line_id: str) -> None:
        self._enter("remove_item")
        await asyncio.sleep(0)
        self._require(line_id, CartRemoveError)
        self.lines = tuple(line for line in self.lines if line.line_id != line_id)

    async def clear_cart(self) -> None:
        self._enter("clear_cart")
        await asyncio.sleep(0)
        self.lines = ()

    # ── Helpers ──

    def _enter(self, operation: str) -> None:
        self.calls[operation] += 1
        if self._failures[operation]:
            raise self._failures[operation].pop(0)

    def _require(self, line_id: str, error_type: type[CartUpdateError | CartRemoveError]) -> None:
        if not any(line.line_id == line_id for line in self.lines):
            raise error_type(message=f"Cart line {line_id} not found", status_code=404)

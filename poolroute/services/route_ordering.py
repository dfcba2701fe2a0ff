"""
Route Ordering Engine

Keeps the manual visiting order of customers within each service day.

- Lazy initialization fills in missing sort_order values with the customer's
  position in its service-day group (arrival order) and persists them.
- Move up / move down swap sort_order with the adjacent customer of the same
  day. Both writes are issued together; if either fails the move is reported
  as failed and the write that succeeded is NOT rolled back.
- Only one move per session may be in flight; extra requests are ignored.
- The ordered route can be narrowed by a name or address search, and counted
  per service day.

Persistence is injected as an async writer ``write(customer_id, sort_order)``
so the engine works against any store.
"""

import asyncio
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Optional

from ..shared.constants import ROUTE_DAYS

logger = logging.getLogger(__name__)

SortOrderWriter = Callable[[str, int], Awaitable[None]]

MOVED = "moved"
UNCHANGED = "unchanged"
IGNORED = "ignored"


class RouteOrderingError(Exception):
    """Raised when sort_order writes could not all be persisted"""

    def __init__(self, message: str, failures: list[BaseException]):
        super().__init__(message)
        self.failures = failures


class SortOrderSwapError(RouteOrderingError):
    """One or both writes of a swap failed; the other write may have been applied"""


@dataclass
class MoveResult:
    status: str
    customer_id: str
    neighbour_id: Optional[str] = None


def order_key(customer) -> int:
    """Missing sort_order sorts as 0"""
    return customer.sort_order if customer.sort_order is not None else 0


def sort_day_group(customers: Iterable, service_day: str) -> list:
    """Customers of one service day by sort_order; stable sort keeps arrival order on ties"""
    return sorted((c for c in customers if c.service_day == service_day), key=order_key)


def sort_route(customers: Iterable) -> list:
    """All customers by service_day, then sort_order, then arrival order"""
    return sorted(customers, key=lambda c: (c.service_day, order_key(c)))


def search_route(customers: Iterable, term: Optional[str]) -> list:
    """Customers whose name or address contains term, ignoring case; order is kept"""
    customers = list(customers)
    if not term:
        return customers
    needle = term.lower()
    return [c for c in customers if needle in c.full_name.lower() or needle in c.address.lower()]


def count_by_service_day(customers: Iterable) -> dict[str, int]:
    """Customers per service day; every route day is listed, even with no customers"""
    counts = {day: 0 for day in ROUTE_DAYS}
    for customer in customers:
        counts[customer.service_day] = counts.get(customer.service_day, 0) + 1
    return counts


def plan_initial_sort_orders(customers: Iterable) -> list[tuple]:
    """
    (customer, sort_order) pairs for customers lacking a sort_order.
    The value is the customer's position in its service-day group, in arrival order.
    """
    positions: dict[str, int] = defaultdict(int)
    plan = []
    for customer in customers:
        position = positions[customer.service_day]
        positions[customer.service_day] += 1
        if customer.sort_order is None:
            plan.append((customer, position))
    return plan


async def _write_all(writes: list[Awaitable[None]]) -> list[BaseException]:
    results = await asyncio.gather(*writes, return_exceptions=True)
    return [result for result in results if isinstance(result, BaseException)]


class RouteOrderingEngine:
    """Per-day manual ordering with a one-move-per-session guard"""

    def __init__(self):
        self._in_flight: set[str] = set()

    def is_moving(self, session_key: str) -> bool:
        return session_key in self._in_flight

    async def initialize(self, customers: list, write: SortOrderWriter) -> list:
        """Persist missing sort orders, then return the ordered route"""
        plan = plan_initial_sort_orders(customers)
        if plan:
            logger.info(f"🔢 Initializing sort order for {len(plan)} customer(s)")
            failures = await _write_all([write(c.public_id, order) for c, order in plan])
            if failures:
                logger.error(f"❌ Sort order initialization failed: {failures[0]}")
                raise RouteOrderingError("Failed to initialize sort order", failures)
            for customer, order in plan:
                customer.sort_order = order

        return sort_route(customers)

    async def move_up(
        self, session_key: str, customer, customers: list, write: SortOrderWriter
    ) -> MoveResult:
        return await self._move(session_key, customer, customers, write, step=-1)

    async def move_down(
        self, session_key: str, customer, customers: list, write: SortOrderWriter
    ) -> MoveResult:
        return await self._move(session_key, customer, customers, write, step=1)

    async def _move(
        self, session_key: str, customer, customers: list, write: SortOrderWriter, step: int
    ) -> MoveResult:
        if session_key in self._in_flight:
            logger.info(f"⏳ Move ignored for {customer.public_id}: another move is pending")
            return MoveResult(status=IGNORED, customer_id=customer.public_id)

        self._in_flight.add(session_key)
        try:
            group = sort_day_group(customers, customer.service_day)
            index = next(
                (i for i, c in enumerate(group) if c.public_id == customer.public_id), None
            )
            if index is None:
                raise LookupError(f"Customer {customer.public_id} is not in its day group")

            neighbour_index = index + step
            if neighbour_index < 0 or neighbour_index >= len(group):
                return MoveResult(status=UNCHANGED, customer_id=customer.public_id)

            neighbour = group[neighbour_index]
            customer_order = customer.sort_order
            neighbour_order = neighbour.sort_order

            failures = await _write_all(
                [
                    write(customer.public_id, neighbour_order),
                    write(neighbour.public_id, customer_order),
                ]
            )
            if failures:
                logger.error(
                    f"❌ Failed to swap sort order of {customer.public_id} and "
                    f"{neighbour.public_id}: {failures[0]}"
                )
                raise SortOrderSwapError("Failed to move customer", failures)

            customer.sort_order = neighbour_order
            neighbour.sort_order = customer_order
            logger.info(
                f"↕️ Swapped {customer.public_id} with {neighbour.public_id} on {customer.service_day}"
            )
            return MoveResult(
                status=MOVED, customer_id=customer.public_id, neighbour_id=neighbour.public_id
            )
        finally:
            self._in_flight.discard(session_key)

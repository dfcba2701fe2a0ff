"""
Aggregation Engine

Groups customers and records by service day and calendar window to build the
daily route, the history page and the monthly chemical usage view.

All functions are pure: they take the latest fetched snapshot and an explicit
``now`` and recompute everything on each call.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from ..shared.calendar import (
    Window,
    is_within,
    parse_service_date,
    today_string,
    trailing_month_start,
    week_window,
    weekday_name,
)
from ..shared.constants import ROUTE_DAYS, UNKNOWN_CUSTOMER_NAME
from ..shared.navigation import create_page_url
from .route_ordering import order_key

logger = logging.getLogger(__name__)


@dataclass
class RouteStop:
    customer: object
    completed: bool
    last_week_log: Optional[object]
    action_url: str


@dataclass
class MissedService:
    customer: object
    scheduled_day: str
    action_url: str


@dataclass
class RouteStats:
    total: int
    completed: int
    pending: int


@dataclass
class DailyRoute:
    date: str
    weekday: str
    stops: list[RouteStop]
    missed: list[MissedService]
    stats: RouteStats


@dataclass
class CustomerDetail:
    customer: object
    logs: list
    last_week_log: Optional[object]


@dataclass
class CustomerHistory:
    customer: object
    logs: list


@dataclass
class CustomerUsageGroup:
    customer_id: str
    customer_name: str
    customer: Optional[object]
    records: list = field(default_factory=list)


def logs_in_window(logs: Iterable, window: Window) -> list:
    """Logs whose service_date falls in window; malformed dates are skipped"""
    return [log for log in logs if is_within(log.service_date, window)]


def first_log_per_customer(logs: Iterable) -> dict:
    """First log encountered for each customer_id, in input order"""
    first: dict = {}
    for log in logs:
        if log.customer_id not in first:
            first[log.customer_id] = log
    return first


def todays_roster(customers: Iterable, now: datetime) -> list:
    """Customers scheduled for today's weekday in route order; empty on weekends"""
    today = weekday_name(now)
    if today not in ROUTE_DAYS:
        return []
    return sorted((c for c in customers if c.service_day == today), key=order_key)


def completed_customer_ids(logs: Iterable, now: datetime) -> set[str]:
    """customer_ids with at least one log dated today"""
    today = today_string(now)
    return {log.customer_id for log in logs if log.service_date == today}


def last_week_logs_by_customer(logs: Iterable, now: datetime) -> dict:
    """First-match log per customer inside last week's window"""
    return first_log_per_customer(logs_in_window(logs, week_window(-1, now)))


def detect_missed_services(customers: list, logs: Iterable, now: datetime) -> list[MissedService]:
    """
    Customers scheduled on an earlier route day this week with no log this week.
    Ordered by weekday, then by the customers' input order.
    """
    today = weekday_name(now)
    if today not in ROUTE_DAYS:
        return []

    serviced_this_week = {log.customer_id for log in logs_in_window(logs, week_window(0, now))}

    missed = []
    for day in ROUTE_DAYS[: ROUTE_DAYS.index(today)]:
        for customer in customers:
            if customer.service_day != day or customer.public_id in serviced_this_week:
                continue
            missed.append(
                MissedService(
                    customer=customer,
                    scheduled_day=day,
                    action_url=create_page_url("NewServiceLog", customerId=customer.public_id),
                )
            )
    return missed


def _stop_url(customer, completed: bool) -> str:
    if completed:
        return create_page_url("CustomerDetail", id=customer.public_id)
    return create_page_url("NewServiceLog", customerId=customer.public_id)


def build_daily_route(customers: list, logs: list, now: datetime) -> DailyRoute:
    """Today's roster with completion flags, last week's readings and missed services"""
    roster = todays_roster(customers, now)
    completed_ids = completed_customer_ids(logs, now)
    last_week = last_week_logs_by_customer(logs, now)

    stops = []
    for customer in roster:
        completed = customer.public_id in completed_ids
        stops.append(
            RouteStop(
                customer=customer,
                completed=completed,
                last_week_log=last_week.get(customer.public_id),
                action_url=_stop_url(customer, completed),
            )
        )

    completed_count = sum(1 for stop in stops if stop.completed)
    return DailyRoute(
        date=today_string(now),
        weekday=weekday_name(now),
        stops=stops,
        missed=detect_missed_services(customers, logs, now),
        stats=RouteStats(
            total=len(stops), completed=completed_count, pending=len(stops) - completed_count
        ),
    )


def build_customer_detail(customer, logs: list, now: datetime) -> CustomerDetail:
    """A customer's logs (already newest first) plus last week's reading"""
    last_week = last_week_logs_by_customer(logs, now)
    return CustomerDetail(
        customer=customer, logs=logs, last_week_log=last_week.get(customer.public_id)
    )


def group_history(customers: list, logs: Iterable, now: datetime) -> dict[str, list[CustomerHistory]]:
    """
    Logs from the trailing month grouped under their customer, per route day.
    Customers without logs in that window are left out.
    """
    cutoff = trailing_month_start(now)

    logs_by_customer = defaultdict(list)
    for log in logs:
        service_date = parse_service_date(log.service_date)
        if service_date is None:
            logger.warning(f"⚠️ Invalid date ignored: {log.service_date!r}")
            continue
        if service_date > cutoff:
            logs_by_customer[log.customer_id].append(log)

    history = {}
    for day in ROUTE_DAYS:
        history[day] = [
            CustomerHistory(customer=c, logs=logs_by_customer[c.public_id])
            for c in customers
            if c.service_day == day and logs_by_customer.get(c.public_id)
        ]
    return history


def group_chemical_usage(
    customers: Iterable, records: Iterable, window: Window
) -> list[CustomerUsageGroup]:
    """
    Usage records inside window grouped by customer, groups sorted by customer
    name (case-insensitive). Customers without records are omitted.
    """
    customers_by_id = {c.public_id: c for c in customers}

    groups: dict[str, CustomerUsageGroup] = {}
    for record in records:
        if not record.created_date or not is_within(record.created_date, window):
            continue
        group = groups.get(record.customer_id)
        if group is None:
            customer = customers_by_id.get(record.customer_id)
            group = CustomerUsageGroup(
                customer_id=record.customer_id,
                customer_name=customer.full_name if customer else UNKNOWN_CUSTOMER_NAME,
                customer=customer,
            )
            groups[record.customer_id] = group
        group.records.append(record)

    return sorted(groups.values(), key=lambda g: g.customer_name.casefold())

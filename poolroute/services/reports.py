"""
Report Assembler

Builds the weekly service report and the monthly chemical usage report from
the aggregation results. Nothing here filters on record content.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ..shared.calendar import Window, month_window, week_window
from ..shared.constants import ROUTE_DAYS
from .aggregation import first_log_per_customer, group_chemical_usage, logs_in_window
from .route_ordering import sort_day_group


@dataclass
class WeeklyReportRow:
    customer: object
    log: object


@dataclass
class WeeklyReportSection:
    day: str
    rows: list[WeeklyReportRow] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.rows)


@dataclass
class WeeklyReport:
    window: Window
    sections: list[WeeklyReportSection]

    @property
    def total_serviced(self) -> int:
        return sum(section.count for section in self.sections)


@dataclass
class ChemicalUsageSection:
    customer_id: str
    customer_name: str
    customer_address: str
    records: list

    @property
    def count(self) -> int:
        return len(self.records)


@dataclass
class ChemicalUsageReport:
    window: Window
    sections: list[ChemicalUsageSection]

    @property
    def total_entries(self) -> int:
        return sum(section.count for section in self.sections)


def clamp_offset(offset: int) -> int:
    """Reports never look into the future"""
    return min(offset, 0)


def build_weekly_report(customers: list, logs: list, now: datetime, week_offset: int = 0) -> WeeklyReport:
    window = week_window(clamp_offset(week_offset), now)
    week_logs = first_log_per_customer(logs_in_window(logs, window))

    sections = []
    for day in ROUTE_DAYS:
        rows = [
            WeeklyReportRow(customer=customer, log=week_logs[customer.public_id])
            for customer in sort_day_group(customers, day)
            if customer.public_id in week_logs
        ]
        sections.append(WeeklyReportSection(day=day, rows=rows))

    return WeeklyReport(window=window, sections=sections)


def build_chemical_usage_report(
    customers: list, records: list, now: datetime, month_offset: int = 0
) -> ChemicalUsageReport:
    window = month_window(clamp_offset(month_offset), now)

    sections = [
        ChemicalUsageSection(
            customer_id=group.customer_id,
            customer_name=group.customer_name,
            customer_address=group.customer.address if group.customer else "",
            records=group.records,
        )
        for group in group_chemical_usage(customers, records, window)
    ]
    return ChemicalUsageReport(window=window, sections=sections)

"""Aggregation of per-customer transaction and virtual-account statistics."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, TypeVar

from .constants import (
    TRANSACTION_STATUS_APPROVED,
    TRANSACTION_STATUS_PENDING,
    TRANSACTION_TYPE_TOP_UP,
    TRANSACTION_TYPE_WITHDRAWAL,
    VA_STATUS_ACTIVE,
    VA_STATUS_INACTIVE,
    VA_STATUS_RESTRICTED,
)

TRANSACTION_TYPE_ADJUSTMENT = "ADJUSTMENT"


@dataclass(frozen=True)
class StatsTransactionInfo:
    """Totals for one customer, transaction type, currency and status."""

    customer_id: int
    transaction_type: str = ""
    currency_symbol: str = ""
    transaction_status: str = ""
    total_amount: float = 0.0
    total_received: float = 0.0
    total_fee: float = 0.0


@dataclass
class StatsBalanceResult:
    """Balance figures derived from transaction totals.

    ``total_withdrawal`` counts every withdrawal row, whatever its status;
    ``display_balance`` is ``total_received - total_withdrawal``.
    """

    total_top_up_success_before_fee: float = 0.0
    total_received: float = 0.0
    total_withdrawal_success: float = 0.0
    total_withdrawal: float = 0.0
    display_balance: float = 0.0
    total_fee: float = 0.0
    total_withdrawal_pending: float = 0.0
    total_top_up_pending: float = 0.0


@dataclass
class StatsVirtualAccountInfo:
    """Virtual-account counts of one customer."""

    total_created: int = 0
    total_active: int = 0
    total_inactive: int = 0
    total_restricted: int = 0


@dataclass(frozen=True)
class VAStatusCount:
    """The number of a customer's virtual accounts in one status."""

    customer_id: int
    status: str
    total: int


def calculate_stats_balance_result(records: Iterable[StatsTransactionInfo]) -> StatsBalanceResult:
    """Fold transaction totals into a balance summary."""
    result = StatsBalanceResult()
    for info in records:
        if info.transaction_type == TRANSACTION_TYPE_TOP_UP:
            if info.transaction_status == TRANSACTION_STATUS_APPROVED:
                result.total_top_up_success_before_fee += info.total_amount
                result.total_received += info.total_received
                result.total_fee += info.total_fee
            if info.transaction_status == TRANSACTION_STATUS_PENDING:
                result.total_top_up_pending += info.total_amount
        elif info.transaction_type == TRANSACTION_TYPE_WITHDRAWAL:
            if info.transaction_status == TRANSACTION_STATUS_PENDING:
                result.total_withdrawal_pending += info.total_amount
            if info.transaction_status == TRANSACTION_STATUS_APPROVED:
                result.total_withdrawal_success += info.total_amount
            result.total_withdrawal += info.total_amount
        elif info.transaction_type == TRANSACTION_TYPE_ADJUSTMENT:
            result.total_top_up_success_before_fee += info.total_amount
            result.total_received += info.total_received
    result.display_balance = result.total_received - result.total_withdrawal
    return result


_R = TypeVar("_R", StatsTransactionInfo, VAStatusCount)


def group_by_customer(records: Iterable[_R]) -> dict[int, list[_R]]:
    """Group records by customer id, keeping their order."""
    grouped: dict[int, list[_R]] = defaultdict(list)
    for record in records:
        grouped[record.customer_id].append(record)
    return dict(grouped)


def summarize_virtual_accounts(rows: Iterable[VAStatusCount]) -> dict[int, StatsVirtualAccountInfo]:
    """Turn per-status counts into per-customer virtual-account summaries.

    Every status counts towards ``total_created``; the active, inactive and
    restricted counts are taken from their rows.
    """
    result: dict[int, StatsVirtualAccountInfo] = {}
    for customer_id, counts in group_by_customer(rows).items():
        info = StatsVirtualAccountInfo()
        for row in counts:
            if row.status == VA_STATUS_ACTIVE:
                info.total_active = row.total
            elif row.status == VA_STATUS_INACTIVE:
                info.total_inactive = row.total
            elif row.status == VA_STATUS_RESTRICTED:
                info.total_restricted = row.total
            info.total_created += row.total
        result[customer_id] = info
    return result
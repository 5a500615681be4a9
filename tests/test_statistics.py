from coreledger.statistics import (
    StatsBalanceResult,
    StatsTransactionInfo,
    StatsVirtualAccountInfo,
    VAStatusCount,
    calculate_stats_balance_result,
    group_by_customer,
    summarize_virtual_accounts,
)


def _tx(tx_type, status, amount=0.0, received=0.0, fee=0.0, customer=1):
    return StatsTransactionInfo(
        customer_id=customer,
        transaction_type=tx_type,
        currency_symbol="VNDW",
        transaction_status=status,
        total_amount=amount,
        total_received=received,
        total_fee=fee,
    )


def test_empty_records_give_zero_result():
    assert calculate_stats_balance_result([]) == StatsBalanceResult()


def test_approved_top_up_counts_amount_received_and_fee():
    result = calculate_stats_balance_result([_tx("TOP_UP", "APPROVED", 100.0, 90.0, 10.0)])
    assert result.total_top_up_success_before_fee == 100.0
    assert result.total_received == 90.0
    assert result.total_fee == 10.0
    assert result.display_balance == 90.0
    assert result.total_top_up_pending == 0.0


def test_pending_top_up_only_counts_pending():
    result = calculate_stats_balance_result([_tx("TOP_UP", "PENDING", 50.0, 45.0, 5.0)])
    assert result.total_top_up_pending == 50.0
    assert result.total_received == 0.0
    assert result.total_fee == 0.0


def test_withdrawals_count_towards_total_whatever_status():
    records = [
        _tx("WITHDRAWAL", "PENDING", 30.0),
        _tx("WITHDRAWAL", "APPROVED", 20.0),
        _tx("WITHDRAWAL", "REJECTED", 5.0),
    ]
    result = calculate_stats_balance_result(records)
    assert result.total_withdrawal_pending == 30.0
    assert result.total_withdrawal_success == 20.0
    assert result.total_withdrawal == 30.0 + 20.0 + 5.0


def test_adjustment_adds_amount_and_received_but_not_fee():
    result = calculate_stats_balance_result([_tx("ADJUSTMENT", "APPROVED", 40.0, 40.0, 3.0)])
    assert result.total_top_up_success_before_fee == 40.0
    assert result.total_received == 40.0
    assert result.total_fee == 0.0


def test_display_balance_is_received_minus_withdrawal():
    records = [
        _tx("TOP_UP", "APPROVED", 100.0, 90.0, 10.0),
        _tx("ADJUSTMENT", "APPROVED", 25.0, 25.0),
        _tx("WITHDRAWAL", "APPROVED", 20.0),
        _tx("WITHDRAWAL", "PENDING", 15.0),
        _tx("INTERNAL", "APPROVED", 999.0, 999.0),
    ]
    result = calculate_stats_balance_result(records)
    assert result.display_balance == result.total_received - result.total_withdrawal
    assert result.total_received == 90.0 + 25.0


def test_group_by_customer_keeps_order():
    a = _tx("TOP_UP", "APPROVED", 1.0, customer=1)
    b = _tx("TOP_UP", "APPROVED", 2.0, customer=2)
    c = _tx("WITHDRAWAL", "PENDING", 3.0, customer=1)
    grouped = group_by_customer([a, b, c])
    assert grouped == {1: [a, c], 2: [b]}


def test_summarize_virtual_accounts():
    rows = [
        VAStatusCount(customer_id=1, status="ACTIVE", total=3),
        VAStatusCount(customer_id=1, status="INACTIVE", total=2),
        VAStatusCount(customer_id=1, status="RESTRICTED", total=1),
        VAStatusCount(customer_id=1, status="PENDING", total=4),
        VAStatusCount(customer_id=2, status="ACTIVE", total=5),
    ]
    result = summarize_virtual_accounts(rows)
    assert result[1] == StatsVirtualAccountInfo(
        total_created=3 + 2 + 1 + 4, total_active=3, total_inactive=2, total_restricted=1
    )
    assert result[2] == StatsVirtualAccountInfo(total_created=5, total_active=5)


def test_summarize_virtual_accounts_empty():
    assert summarize_virtual_accounts([]) == {}


def test_created_is_sum_of_all_rows():
    rows = [VAStatusCount(7, status, n) for status, n in [("ACTIVE", 2), ("REJECTED", 6), ("PROCESS", 1)]]
    info = summarize_virtual_accounts(rows)[7]
    assert info.total_created == sum(row.total for row in rows)
    assert info.total_inactive == 0
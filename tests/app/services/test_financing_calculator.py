"""Testes do cálculo de retorno, comissões e lucro líquido."""

from __future__ import annotations

from decimal import Decimal

import pytest

from app.domain.financing import FinancingProposal, ReturnType
from app.services.financing_calculator import (
    ILA_RATE,
    ValuationInputs,
    commission_from_rate,
    compute_valuation,
    expected_return_for,
    released_margin,
    return_tax_for,
    summarize_portfolio,
)
from fsm.states.financing import FinancingStatus


def _proposal(**overrides: object) -> FinancingProposal:
    data: dict[str, object] = {
        "id": "fin-1",
        "customer_name": "João Silva",
        "bank": "Banco Pan",
    }
    data.update(overrides)
    return FinancingProposal(**data)


class TestComputeValuation:
    """Lucro líquido determinístico a partir dos campos de entrada."""

    def test_reference_example(self) -> None:
        valuation = compute_valuation(
            ValuationInputs(
                asset_value=Decimal("100000"),
                accessories_percentage=Decimal("5"),
                fee_amount=Decimal("200"),
                expected_return=Decimal("20000"),
                agent_commission=Decimal("1000"),
                seller_commission=Decimal("500"),
            )
        )

        assert valuation.ila_amount == Decimal("5100.00")
        assert valuation.accessories_value == Decimal("5000.00")
        assert valuation.net_profit == Decimal("18600.00")

    def test_missing_inputs_count_as_zero(self) -> None:
        valuation = compute_valuation(ValuationInputs())
        assert valuation.ila_amount == Decimal("0.00")
        assert valuation.accessories_value == Decimal("0.00")
        assert valuation.net_profit == Decimal("0.00")

    def test_same_inputs_same_result(self) -> None:
        inputs = ValuationInputs(expected_return=Decimal("1234.56"), fee_amount=Decimal("10"))
        assert compute_valuation(inputs) == compute_valuation(inputs)

    def test_commissions_can_make_profit_negative(self) -> None:
        valuation = compute_valuation(
            ValuationInputs(expected_return=Decimal("1000"), agent_commission=Decimal("2000"))
        )
        assert valuation.net_profit == Decimal("-1255.00")

    def test_ila_rounds_half_up_to_cents(self) -> None:
        valuation = compute_valuation(ValuationInputs(expected_return=Decimal("0.10")))
        # 0.10 * 0.255 = 0.0255
        assert valuation.ila_amount == Decimal("0.03")
        assert ILA_RATE == Decimal("0.255")


class TestReturnAndCommissions:
    @pytest.mark.parametrize(
        ("return_type", "expected"),
        [
            (ReturnType.R0, Decimal("0.00")),
            (ReturnType.R1, Decimal("600.00")),
            (ReturnType.R2, Decimal("1200.00")),
            (ReturnType.R3, Decimal("1800.00")),
            (ReturnType.R4, Decimal("2400.00")),
            (ReturnType.R6, Decimal("3000.00")),
            (ReturnType.RF, Decimal("750.00")),
        ],
    )
    def test_expected_return_table(self, return_type: ReturnType, expected: Decimal) -> None:
        assert expected_return_for(return_type, Decimal("50000")) == expected

    def test_return_tax_is_seven_percent(self) -> None:
        assert return_tax_for(Decimal("20000")) == Decimal("1400.00")
        assert return_tax_for(None) == Decimal("0.00")

    def test_commission_from_percentage_rate(self) -> None:
        assert commission_from_rate(Decimal("20000"), Decimal("1.5")) == Decimal("300.00")
        assert commission_from_rate(Decimal("20000"), None) == Decimal("0.00")

    def test_released_margin(self) -> None:
        margin = released_margin(
            Decimal("52000"), Decimal("50000"), Decimal("300"), Decimal("200")
        )
        assert margin == Decimal("1500.00")


class TestSummarizePortfolio:
    def test_counts_and_totals(self) -> None:
        proposals = [
            _proposal(
                id="a",
                expected_return=Decimal("1000"),
                released_amount=Decimal("10000"),
            ),
            _proposal(
                id="b",
                status=FinancingStatus.PAID,
                asset_value=Decimal("50000"),
                expected_return=Decimal("2000"),
                released_amount=Decimal("52000"),
                agent_commission=Decimal("500"),
            ),
            _proposal(
                id="c",
                status=FinancingStatus.REJECTED,
                expected_return=Decimal("9999"),
            ),
        ]

        summary = summarize_portfolio(proposals)

        assert summary.count_by_status == {
            FinancingStatus.ANALYSIS: 1,
            FinancingStatus.APPROVED: 0,
            FinancingStatus.PAID: 1,
            FinancingStatus.REJECTED: 1,
        }
        assert summary.total_released == Decimal("62000.00")
        # 1000 - 255 = 745; 2000 - 510 - 500 = 990; rejeitada fora
        assert summary.total_net_profit == Decimal("1735.00")
        assert summary.total_paid_margin == Decimal("1500.00")

    def test_empty_portfolio(self) -> None:
        summary = summarize_portfolio([])
        assert sum(summary.count_by_status.values()) == 0
        assert summary.total_net_profit == Decimal("0.00")

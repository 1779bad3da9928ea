"""Cálculo de retorno, comissões e lucro líquido de financiamentos.

Funções puras sobre Decimal. Entradas ausentes (None) valem zero; a
validação de não-negatividade é responsabilidade do chamador.

Fórmula do lucro líquido:
    ila_amount        = expected_return * 0.255
    accessories_value = asset_value * accessories_percentage / 100
    net_profit        = expected_return - ila_amount + accessories_value
                        + fee_amount - agent_commission - seller_commission
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from app.domain.financing import RETURN_PERCENTAGES, ReturnType
from app.domain.money import quantize_cents, to_decimal
from fsm.states.financing import FinancingStatus

if TYPE_CHECKING:
    from app.domain.financing import FinancingProposal

ILA_RATE = Decimal("0.255")
RETURN_TAX_RATE = Decimal("0.07")
HUNDRED = Decimal("100")


@dataclass(frozen=True, slots=True)
class ValuationInputs:
    """Campos de entrada de uma proposta."""

    asset_value: Decimal | None = None
    accessories_percentage: Decimal | None = None
    fee_amount: Decimal | None = None
    expected_return: Decimal | None = None
    agent_commission: Decimal | None = None
    seller_commission: Decimal | None = None


@dataclass(frozen=True, slots=True)
class FinancingValuation:
    """Resultado do cálculo, em centavos exatos."""

    ila_amount: Decimal
    accessories_value: Decimal
    net_profit: Decimal


@dataclass(frozen=True, slots=True)
class PortfolioSummary:
    """Totais da carteira de propostas."""

    count_by_status: dict[FinancingStatus, int] = field(default_factory=dict)
    total_released: Decimal = Decimal("0.00")
    total_net_profit: Decimal = Decimal("0.00")
    total_paid_margin: Decimal = Decimal("0.00")


def compute_valuation(inputs: ValuationInputs) -> FinancingValuation:
    """Calcula ILA, valor de acessórios e lucro líquido.

    Exemplo:
        >>> v = compute_valuation(ValuationInputs(
        ...     asset_value=Decimal("100000"), accessories_percentage=Decimal("5"),
        ...     fee_amount=Decimal("200"), expected_return=Decimal("20000"),
        ...     agent_commission=Decimal("1000"), seller_commission=Decimal("500")))
        >>> v.net_profit
        Decimal('18600.00')
    """
    expected_return = to_decimal(inputs.expected_return)
    asset_value = to_decimal(inputs.asset_value)

    ila_amount = expected_return * ILA_RATE
    accessories_value = asset_value * (to_decimal(inputs.accessories_percentage) / HUNDRED)
    net_profit = (
        expected_return
        - ila_amount
        + accessories_value
        + to_decimal(inputs.fee_amount)
        - to_decimal(inputs.agent_commission)
        - to_decimal(inputs.seller_commission)
    )

    return FinancingValuation(
        ila_amount=quantize_cents(ila_amount),
        accessories_value=quantize_cents(accessories_value),
        net_profit=quantize_cents(net_profit),
    )


def expected_return_for(return_type: ReturnType, asset_value: Decimal | None) -> Decimal:
    """Retorno padrão da tabela quando a proposta não informa um valor."""
    return quantize_cents(to_decimal(asset_value) * RETURN_PERCENTAGES[return_type])


def return_tax_for(expected_return: Decimal | None) -> Decimal:
    """Imposto informativo de 7% sobre o retorno."""
    return quantize_cents(to_decimal(expected_return) * RETURN_TAX_RATE)


def commission_from_rate(base: Decimal | None, rate_percent: Decimal | None) -> Decimal:
    """Comissão a partir de uma taxa percentual (1.5 = 1,5%)."""
    return quantize_cents(to_decimal(base) * to_decimal(rate_percent) / HUNDRED)


def released_margin(
    released_amount: Decimal | None,
    asset_value: Decimal | None,
    agent_commission: Decimal | None = None,
    seller_commission: Decimal | None = None,
) -> Decimal:
    """Margem sobre o valor liberado pelo banco."""
    return quantize_cents(
        to_decimal(released_amount)
        - to_decimal(asset_value)
        - to_decimal(agent_commission)
        - to_decimal(seller_commission)
    )


def valuation_inputs_of(proposal: FinancingProposal) -> ValuationInputs:
    return ValuationInputs(
        asset_value=proposal.asset_value,
        accessories_percentage=proposal.accessories_percentage,
        fee_amount=proposal.fee_amount,
        expected_return=proposal.expected_return,
        agent_commission=proposal.agent_commission,
        seller_commission=proposal.seller_commission,
    )


def summarize_portfolio(proposals: Iterable[FinancingProposal]) -> PortfolioSummary:
    """Contagem por status e totais de liberado, lucro e margem paga.

    Propostas rejeitadas não entram no lucro total.
    """
    counts: Counter[FinancingStatus] = Counter()
    total_released = Decimal("0")
    total_net_profit = Decimal("0")
    total_paid_margin = Decimal("0")

    for proposal in proposals:
        counts[proposal.status] += 1
        total_released += to_decimal(proposal.released_amount)
        if proposal.status != FinancingStatus.REJECTED:
            total_net_profit += compute_valuation(valuation_inputs_of(proposal)).net_profit
        if proposal.status == FinancingStatus.PAID:
            total_paid_margin += released_margin(
                proposal.released_amount,
                proposal.asset_value,
                proposal.agent_commission,
                proposal.seller_commission,
            )

    return PortfolioSummary(
        count_by_status={status: counts.get(status, 0) for status in FinancingStatus},
        total_released=quantize_cents(total_released),
        total_net_profit=quantize_cents(total_net_profit),
        total_paid_margin=quantize_cents(total_paid_margin),
    )

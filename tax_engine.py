import logging
from dataclasses import dataclass
from typing import List, Optional

TAX_YEAR = "2024-2025"
FISCAL_YEAR = "2024-25"


@dataclass(frozen=True)
class TaxSlab:
    lower: float
    upper: Optional[float]  # None means no upper bound
    rate: float  # e.g., 0.15 for 15%
    additional: float = 0.0  # fixed tax on everything below `lower`


# Tax slabs for Pakistan (2024-2025), in ascending order
TAX_SLABS: List[TaxSlab] = [
    TaxSlab(lower=0, upper=600000, rate=0, additional=0),
    TaxSlab(lower=600000, upper=1200000, rate=0.05, additional=0),
    TaxSlab(lower=1200000, upper=2200000, rate=0.15, additional=30000),
    TaxSlab(lower=2200000, upper=3200000, rate=0.25, additional=180000),
    TaxSlab(lower=3200000, upper=4100000, rate=0.30, additional=430000),
    TaxSlab(lower=4100000, upper=None, rate=0.35, additional=700000),
]


@dataclass(frozen=True)
class TaxResult:
    monthly_salary: float
    annual_salary: float
    monthly_tax: float
    annual_tax: float
    monthly_net_salary: float
    annual_net_salary: float

    @property
    def effective_rate(self):
        if not self.annual_salary:
            return 0.0
        return self.annual_tax / self.annual_salary

    def chart_data(self):
        return [
            {"name": "Net Salary", "value": self.annual_net_salary},
            {"name": "Tax", "value": self.annual_tax},
        ]


def _upper(slab):
    return float("inf") if slab.upper is None else slab.upper


def compute_tax(annual_income, slabs=TAX_SLABS):
    """Compute tax owed on an annual income under progressive slabs.

    The tax is the fixed amount of the slab holding the income plus the
    marginal rate on the part of the income above that slab's floor. An
    income sitting exactly on an upper bound belongs to the lower slab.

    Args:
        annual_income: yearly income (>= 0). Not validated here.
        slabs: ordered low-to-high list of TaxSlab.

    Returns:
        Total yearly tax.
    """
    total_tax = 0.0
    for slab in slabs:
        if annual_income > slab.lower:
            taxable_amount = min(annual_income, _upper(slab)) - slab.lower
            total_tax = slab.additional + taxable_amount * slab.rate
            if annual_income <= _upper(slab):
                break
    return total_tax


def find_slab(annual_income, slabs=TAX_SLABS):
    """Return the slab an income falls into (upper bound inclusive)."""
    for slab in slabs:
        if annual_income <= _upper(slab):
            return slab
    return slabs[-1]


def calculate_salary_tax(monthly_salary, slabs=TAX_SLABS):
    annual_salary = monthly_salary * 12
    annual_tax = compute_tax(annual_salary, slabs)
    annual_net_salary = annual_salary - annual_tax

    logging.info(
        f"Annual salary: {annual_salary}, tax: {annual_tax}, net: {annual_net_salary}"
    )

    return TaxResult(
        monthly_salary=monthly_salary,
        annual_salary=annual_salary,
        monthly_tax=annual_tax / 12,
        annual_tax=annual_tax,
        monthly_net_salary=annual_net_salary / 12,
        annual_net_salary=annual_net_salary,
    )


def slab_breakdown(annual_income, slabs=TAX_SLABS):
    """Per-slab rows showing how the yearly tax builds up.

    Each row covers one slab the income reaches: the portion of income
    taxed inside it, the tax on that portion, and the running total. The
    last row's cumulative tax matches compute_tax.
    """
    rows = []
    cumulative_tax = 0.0

    for slab in slabs:
        if annual_income > slab.lower:
            upper = _upper(slab)
            taxable_amount = min(annual_income, upper) - slab.lower
            slab_tax = taxable_amount * slab.rate
            cumulative_tax = slab.additional + slab_tax

            rows.append(
                {
                    "Income Level": f"{slab.lower:,.0f} - "
                    + (f"{upper:,.0f}" if slab.upper is not None else "Above"),
                    "Slab Rate (%)": round(slab.rate * 100, 2),
                    "Taxable In Slab": taxable_amount,
                    "Tax For Slab": slab_tax,
                    "Cumulative Tax": cumulative_tax,
                }
            )

            if annual_income <= upper:
                break

    return rows


def check_slab_table(slabs):
    """Validate that slabs are contiguous and their fixed amounts add up.

    Raises:
        ValueError: naming the first slab that breaks the table.
    """
    if not slabs:
        raise ValueError("Slab table is empty")
    if slabs[0].lower != 0:
        raise ValueError(f"First slab must start at 0, got {slabs[0].lower}")
    if slabs[-1].upper is not None:
        raise ValueError("Last slab must be unbounded")

    running_tax = 0.0
    for previous, slab in zip([None] + list(slabs[:-1]), slabs):
        if slab.upper is not None and slab.upper <= slab.lower:
            raise ValueError(f"Slab starting at {slab.lower} has upper <= lower")
        if not 0 <= slab.rate <= 1:
            raise ValueError(f"Slab starting at {slab.lower} has rate {slab.rate}")
        if previous is not None:
            if previous.upper != slab.lower:
                raise ValueError(
                    f"Slab starting at {slab.lower} does not follow {previous.upper}"
                )
            running_tax += (previous.upper - previous.lower) * previous.rate
        if abs(slab.additional - running_tax) > 0.005:
            raise ValueError(
                f"Slab starting at {slab.lower} has additional {slab.additional}, "
                f"expected {running_tax}"
            )


def describe_slab(slab):
    if slab.upper is None:
        text = f"Above Rs. {slab.lower:,.0f}: "
    elif slab.lower == 0:
        return f"Up to Rs. {slab.upper:,.0f}: {slab.rate * 100:g}%"
    else:
        text = f"Rs. {slab.lower + 1:,.0f} - Rs. {slab.upper:,.0f}: "

    if slab.additional:
        text += f"Rs. {slab.additional:,.0f} + "
    return text + f"{slab.rate * 100:g}% of the amount exceeding Rs. {slab.lower:,.0f}"


check_slab_table(TAX_SLABS)

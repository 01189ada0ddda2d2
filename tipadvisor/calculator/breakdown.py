from __future__ import annotations

from .models import TipBreakdown


def calculate_tip(
    bill_amount: float,
    tip_percentage: float | None,
    split_count: int = 1,
) -> TipBreakdown:
    """
    Work out the tip and totals for a bill, split evenly between people.

    A missing percentage counts as no tip and a split count below one
    counts as a single payer.
    """
    pct = tip_percentage or 0.0
    people = split_count if split_count and split_count >= 1 else 1

    tip_amount = bill_amount * (pct / 100)
    total_amount = bill_amount + tip_amount

    return TipBreakdown(
        tip_amount=round(tip_amount, 2),
        total_amount=round(total_amount, 2),
        tip_per_person=round(tip_amount / people, 2),
        total_per_person=round(total_amount / people, 2),
    )

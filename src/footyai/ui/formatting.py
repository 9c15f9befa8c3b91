"""
Display helpers for the prediction dashboard.
"""

from __future__ import annotations

import pandas as pd

from footyai.config import PROBABILITY_TIERS, STRONG_PICK_THRESHOLD
from footyai.data.schema import PredictionCategory

# Badge colour per tier (Streamlit markdown colour names)
TIER_COLORS = {"high": "green", "good": "blue", "fair": "orange", "low": "gray"}


def probability_tier(probability: float) -> str:
    """Return 'high', 'good', 'fair' or 'low' for a probability in percent."""
    for threshold, tier in PROBABILITY_TIERS:
        if probability >= threshold:
            return tier
    return "low"


def is_strong_pick(probability: float) -> bool:
    return probability >= STRONG_PICK_THRESHOLD


def format_probability(probability: float) -> str:
    """Format without a trailing '.0' for whole numbers (e.g. '72%')."""
    if float(probability).is_integer():
        return f"{int(probability)}%"
    return f"{probability:g}%"


def category_frame(category: PredictionCategory) -> pd.DataFrame:
    """
    Build a table of a category's markets for display.

    Columns: Market, Probability, Tier, Explanation. Rows keep the order the
    model returned them in.
    """
    rows = [
        {
            "Market": item.market_name,
            "Probability": item.probability,
            "Tier": probability_tier(item.probability),
            "Explanation": item.explanation,
        }
        for item in category.items
    ]
    return pd.DataFrame(
        rows, columns=["Market", "Probability", "Tier", "Explanation"]
    )

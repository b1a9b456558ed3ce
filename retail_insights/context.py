from typing import Any

from . import settings
from .schemas import AnalysisBundle, BusinessSummary


def format_inr(amount: float) -> str:
    """Whole rupees with Indian digit grouping, e.g. 1234567 -> '₹12,34,567'."""
    whole = int(round(amount))
    sign = "-" if whole < 0 else ""
    digits = str(abs(whole))

    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])

    return f"₹{sign}{digits}"


def render_overview(summary: BusinessSummary) -> str:
    """Fixed-format overview block shown at the top of a chat session."""
    lines = [
        "📊 Your Business Overview:",
        f"• Total Revenue: {format_inr(summary.total_revenue)}",
        f"• Orders: {summary.total_orders}",
        f"• Average Order Value: ₹{summary.average_order_value:.0f}",
        f"• Customer Rating: {summary.average_rating:.1f}/5",
    ]
    return "\n".join(lines)


def build_chat_context(
    bundle: AnalysisBundle, sample_size: int = settings.CONTEXT_SAMPLE_SIZE
) -> dict[str, Any]:
    """
    JSON-ready context for an external chat/LLM consumer: the full summary plus
    the first `sample_size` records of each dataset.
    """

    def _sample(records: list) -> list[dict[str, Any]]:
        return [
            record.model_dump(mode="json", by_alias=True)
            for record in records[:sample_size]
        ]

    return {
        "businessSummary": bundle.summary.model_dump(mode="json", by_alias=True),
        "sampleSalesData": _sample(bundle.sales),
        "sampleInventoryData": _sample(bundle.inventory),
        "sampleReviews": _sample(bundle.reviews),
    }

"""Reply formatting for nutrition lookups."""

from decimal import ROUND_HALF_UP, Decimal

from edamam_bot.domain.nutrition import NutritionResult

_CENT = Decimal("0.01")


def format_nutrition(query: str, result: NutritionResult, show_detail: bool) -> str:
    """Render a nutrition result as a chat reply.

    Headline calories and weight are printed as received; detail quantities
    are rounded to two decimals. Detail lines follow the table's own order.
    """
    lines = [
        f"食材：{query}",
        f"卡路里：{_plain_number(result.calories)} kcal",
        f"总重量：{_plain_number(result.total_weight)} g",
        f"饮食标签：{', '.join(result.diet_labels)}",
        f"健康标签：{', '.join(result.health_labels)}",
    ]
    if show_detail:
        lines.append("详细营养成分：")
        for nutrient in result.total_nutrients.values():
            quantity = _two_decimals(nutrient.quantity)
            lines.append(f"{nutrient.label}：{quantity} {nutrient.unit}")
    return "\n".join(lines)


def _two_decimals(value: float) -> str:
    # Decimal(float) is exact: 0.125 -> "0.13", 1.005 (really 1.00499...) -> "1.00"
    exact = Decimal(value)
    if not exact.is_finite() or abs(value) >= 1e21:
        return _plain_number(value)
    return str(exact.quantize(_CENT, rounding=ROUND_HALF_UP))


def _plain_number(value: float) -> str:
    """Render a number the way a JavaScript template literal would.

    182.0 -> "182", 0.00001 -> "0.00001", 1e-07 -> "1e-7".
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"

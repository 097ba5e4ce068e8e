"""Normalize tap/bottle prices into one canonical sized-price list.

Accepted input shapes, tried in priority order:

1. array of ``{"size": "0.4L", "price": 6.5}``
2. map of ``size -> price`` or ``size -> {"price": ...}``
3. legacy scalar columns ``price_small`` / ``price_medium`` / ``price_large``

The first shape that yields at least one positive price wins. Non-positive and
non-numeric prices are dropped; prices are rounded to two decimals.
"""
import math
from typing import Any

LEGACY_SIZES = (
    ("price_small", "0.2L"),
    ("price_medium", "0.4L"),
    ("price_large", "1L"),
)


def _coerce_price(value: Any) -> float | None:
    if isinstance(value, dict):
        value = value.get("price")
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(price) or price <= 0:
        return None
    return round(price, 2)


def _append(out: list[dict], size: Any, price: float | None) -> None:
    size = str(size).strip() if size is not None else ""
    if not size or price is None:
        return
    if any(p["size"] == size for p in out):
        return
    out.append({"size": size, "price": price})


def _from_array(items: list) -> list[dict]:
    out: list[dict] = []
    for item in items:
        if isinstance(item, dict):
            _append(out, item.get("size"), _coerce_price(item.get("price")))
    return out


def _from_map(mapping: dict) -> list[dict]:
    out: list[dict] = []
    for size, value in mapping.items():
        _append(out, size, _coerce_price(value))
    return out


def _from_legacy(legacy: dict) -> list[dict]:
    out: list[dict] = []
    for field, size in LEGACY_SIZES:
        _append(out, size, _coerce_price(legacy.get(field)))
    return out


def normalize_prices(prices: Any = None, legacy: dict | None = None) -> list[dict]:
    """Return the canonical ``[{size, price}]`` list for any accepted shape."""
    if isinstance(prices, list):
        result = _from_array(prices)
        if result:
            return result
    elif isinstance(prices, dict):
        result = _from_map(prices)
        if result:
            return result
    return _from_legacy(legacy or {})


def display_price(prices: list[dict] | None) -> float | None:
    """First canonical price, shown on cards and lists."""
    if not prices:
        return None
    return prices[0]["price"]

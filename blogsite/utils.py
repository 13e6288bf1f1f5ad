from __future__ import annotations

import html
from datetime import date

from babel.dates import format_date

BUDDHIST_ERA_OFFSET = 543


def parse_int(value: object, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def parse_list(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    text = str(value).strip()
    if text.startswith("[") and text.endswith("]"):
        inner = text[1:-1]
        items = [item.strip().strip("'\"") for item in inner.split(",")]
    else:
        items = [item.strip() for item in text.split(",")]
    return [item for item in items if item]


def join_url(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base
    return f"{base}/{path}"


def escape_html(value: object) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def display_date(value: date, locale: str) -> str:
    """Long calendar form, e.g. ``January 1, 2024`` for ``en_US``.

    Thai locales count years in the Buddhist era: ``1 มกราคม 2567``.
    """
    if locale.split("_")[0].split("-")[0].lower() == "th":
        return f"{format_date(value, format='d MMMM', locale=locale)} {value.year + BUDDHIST_ERA_OFFSET}"
    return format_date(value, format="long", locale=locale)

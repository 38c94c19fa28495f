# formatting.py
from decimal import Decimal
from typing import List, Union


def format_currency(amount: Union[int, str, Decimal]) -> str:
    """Render an amount in cents as a US dollar string, e.g. 150050 -> "$1,500.50"."""
    cents = int(amount)
    sign = "-" if cents < 0 else ""
    dollars = Decimal(abs(cents)) / 100
    return f"{sign}${dollars:,.2f}"


def generate_pagination(current_page: int, total_pages: int) -> List[Union[int, str]]:
    """
    Page links for a listing, collapsing long ranges with "...".
    """
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    # near the start: first three, gap, last two
    if current_page <= 3:
        return [1, 2, 3, "...", total_pages - 1, total_pages]

    # near the end: first two, gap, last three
    if current_page >= total_pages - 2:
        return [1, 2, "...", total_pages - 2, total_pages - 1, total_pages]

    return [1, "...", current_page - 1, current_page, current_page + 1, "...", total_pages]

"""
Formatting utilities for the TipSplit UI.
"""
from datetime import datetime


def format_currency(value: float, decimals: int = 2) -> str:
    """Format as currency with $ prefix."""
    try:
        if value is None:
            return "-"
        sign = "-" if value < 0 else ""
        return f"{sign}${abs(value):,.{decimals}f}"
    except (TypeError, ValueError):
        return "-"


def format_percent(value: float, decimals: int = 0) -> str:
    """Format a percentage given in percent units (15 -> "15%")."""
    try:
        if value is None:
            return "-"
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "-"


def format_date(date_str: str, fmt: str = "%b %d, %Y") -> str:
    """Format ISO date string for display, e.g. "Oct 18, 2026"."""
    try:
        if not date_str:
            return "-"
        dt = datetime.fromisoformat(date_str.replace('Z', '+00:00'))
        return dt.strftime(fmt)
    except (TypeError, ValueError):
        return "-"


def format_code_label(name: str, code: str) -> str:
    """Option label like "Foreman (FRM)"."""
    if not code:
        return name
    return f"{name} ({code})"

#!/usr/bin/env python3
"""
Terminal Rendering
==================
Rich tables for combination/entropy reports and the strength list.

Usage:
    from passphrasekit.ui import render_combinations

    render_combinations({"normal": gen.calculate_combinations(PhraseStrength.NORMAL)})
"""

from typing import Dict, Mapping, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .combinations import PhraseCombinations, UNKNOWN_ENTROPY_BITS
from .settings import get_setting


def _decimals() -> int:
    return int(get_setting("display.entropy_decimals", 2))


def format_bits(bits: float) -> str:
    if bits == UNKNOWN_ENTROPY_BITS:
        return "unknown"
    return f"{bits:.{_decimals()}f}"


def format_count(count: float) -> str:
    if count >= 1e15:
        return f"{count:.3e}"
    return f"{count:,.0f}"


def combinations_table(rows: Mapping[str, PhraseCombinations], title: str = "Phrase combinations") -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Strength", style="bold")
    table.add_column("Shortest", justify="right")
    table.add_column("Average", justify="right")
    table.add_column("Longest", justify="right")
    table.add_column("Avg bits", justify="right", style="cyan")

    for name, comb in rows.items():
        table.add_row(
            name,
            f"{format_count(comb.shortest)} ({format_bits(comb.shortest_as_entropy_bits)})",
            f"{format_count(comb.optional_average)}",
            f"{format_count(comb.longest)} ({format_bits(comb.longest_as_entropy_bits)})",
            format_bits(comb.optional_average_as_entropy_bits),
        )
    return table


def strengths_table(strengths: Dict[str, str]) -> Table:
    table = Table(title="Phrase strengths", box=box.SIMPLE_HEAVY)
    table.add_column("Strength", style="bold")
    table.add_column("Description")
    for name, description in strengths.items():
        table.add_row(name, description)
    return table


def render_combinations(rows: Mapping[str, PhraseCombinations], console: Optional[Console] = None):
    (console or Console()).print(combinations_table(rows))


def render_strengths(strengths: Dict[str, str], console: Optional[Console] = None):
    (console or Console()).print(strengths_table(strengths))


__all__ = [
    'format_bits',
    'format_count',
    'combinations_table',
    'strengths_table',
    'render_combinations',
    'render_strengths',
]

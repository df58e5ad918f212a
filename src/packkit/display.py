from __future__ import annotations

from rich import box
from rich.table import Table

from .validate import ValidationReport


def build_report_render(report: ValidationReport) -> Table:
    table = Table(title="Packaged Files", box=box.SIMPLE_HEAVY, show_lines=False)
    for col in ("Status", "Path"):
        table.add_column(col)
    for path in report.missing:
        table.add_row("❌ missing", path)
    for path in report.empty:
        table.add_row("⚠️ empty", path)
    if report.ok:
        table.add_row("✅", "All paths exist")
    return table

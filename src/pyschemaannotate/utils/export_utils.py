"""
Export utilities for schematic files and component lists.

Provides helpers to read and write ``.sch`` files without touching their
line endings, and to export the component table to CSV or Excel.
"""

from __future__ import annotations

import csv
import os

from pyschemaannotate.analysis.conflicts import count_units
from pyschemaannotate.model.constants import COMPONENT_EXPORT_HEADERS
from pyschemaannotate.schematic import Schematic


def read_schematic(filepath: str) -> Schematic:
    """
    Load a schematic file.

    The file is read with newline translation disabled so that it can be
    written back unchanged.
    """
    with open(filepath, encoding="utf-8", newline="") as f:
        text = f.read()
    return Schematic(text, filename=os.path.basename(filepath))


def write_schematic(schematic: Schematic, output_dir: str, filename: str | None = None) -> str:
    """
    Write the regenerated schematic to ``output_dir``.

    Args:
        schematic: The schematic to save.
        output_dir: Directory to write into (created if missing).
        filename: File name to use instead of the suggested one.

    Returns:
        str: Path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename or schematic.suggested_filename())
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(schematic.generate_file())
    return path


def component_rows(schematic: Schematic, distinct: bool = True) -> list[list[str]]:
    """
    Build the component table rows, sorted for display.

    Columns follow ``COMPONENT_EXPORT_HEADERS``. With ``distinct`` set,
    multi-unit parts appear once with their unit count.
    """
    units = count_units(schematic.components)
    rows = []
    for comp in schematic.sorted_components(distinct=distinct):
        rows.append(
            [
                comp.reference or "",
                comp.value or "",
                comp.component_name or "",
                comp.footprint_name or "",
                str(units.get(comp.reference, 1) if distinct else 1),
                "yes" if comp.has_conflict else "",
            ]
        )
    return rows


def export_components_to_csv(
    schematic: Schematic, filename: str, distinct: bool = True
) -> None:
    """
    Export the component table to a CSV file.

    Format:
    Reference, Value, Component, Footprint, Units, Conflict

    Args:
        schematic: The schematic to export.
        filename: Path to the output CSV file.
        distinct: One row per physical part instead of one per unit.
    """
    os.makedirs(os.path.dirname(os.path.abspath(filename)), exist_ok=True)

    with open(filename, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(COMPONENT_EXPORT_HEADERS)
        writer.writerows(component_rows(schematic, distinct))


def export_components_to_excel(
    schematic: Schematic, filename: str, distinct: bool = True
) -> None:
    """
    Export the component table to an Excel workbook.

    Conflicting components are highlighted. Requires ``openpyxl``.
    """
    from openpyxl import Workbook
    from openpyxl.styles import Alignment, Font, PatternFill

    wb = Workbook()
    ws = wb.active
    ws.title = "Components"

    header_font = Font(bold=True)
    header_fill = PatternFill(start_color="D9D9D9", end_color="D9D9D9", fill_type="solid")
    conflict_fill = PatternFill(start_color="F4CCCC", end_color="F4CCCC", fill_type="solid")

    for col, header in enumerate(COMPONENT_EXPORT_HEADERS, 1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="left")

    for row_idx, row in enumerate(component_rows(schematic, distinct), 2):
        for col, value in enumerate(row, 1):
            cell = ws.cell(row=row_idx, column=col, value=value)
            if row[-1]:
                cell.fill = conflict_fill
        ws.cell(row=row_idx, column=5).alignment = Alignment(horizontal="right")

    ws.column_dimensions["A"].width = 12
    ws.column_dimensions["B"].width = 16
    ws.column_dimensions["C"].width = 24
    ws.column_dimensions["D"].width = 36
    ws.column_dimensions["E"].width = 8
    ws.column_dimensions["F"].width = 10

    os.makedirs(os.path.dirname(os.path.abspath(filename)), exist_ok=True)
    wb.save(filename)

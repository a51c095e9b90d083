# racepace/report/render_pdf.py
from __future__ import annotations

import re
from html import escape
from pathlib import Path
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle


_EMPHASIS = re.compile(r"(?<!\w)_([^_\n]+)_(?!\w)")


def _strip_emphasis(line: str) -> str:
    # only _word_ wrappers; snake_case names keep their underscores
    return _EMPHASIS.sub(r"\1", line.replace("**", ""))


def _table_cells(line: str) -> List[str]:
    return [c.strip() for c in line.strip().strip('|').split('|')]


def _is_rule(line: str) -> bool:
    return set(line.replace('|', '').strip()) <= {'-', ':'}


def _flush_table(rows: List[List[str]], story: list) -> None:
    if not rows:
        return
    table = Table(rows, repeatRows=1)
    table.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
    ]))
    story.append(table)
    rows.clear()


def render_pdf(markdown_text: str, out_path: Path) -> None:
    styles = getSampleStyleSheet()
    story = []
    table_rows: List[List[str]] = []

    for raw in markdown_text.splitlines():
        line = raw.strip()

        # Splits table rows are collected and emitted as one Table
        if line.startswith("|"):
            if not _is_rule(line):
                table_rows.append(_table_cells(line))
            continue
        _flush_table(table_rows, story)

        if not line or line == "---":
            story.append(Spacer(1, 10))
            continue

        # Strip the markdown emphasis; Paragraph gets escaped text
        plain = _strip_emphasis(line)

        if line.startswith("# "):
            story.append(Paragraph(f"<b>{escape(plain[2:])}</b>", styles["Title"]))
        elif line.startswith("## "):
            story.append(Spacer(1, 12))
            story.append(Paragraph(f"<b>{escape(plain[3:])}</b>", styles["Heading2"]))
        elif line.startswith("- "):
            story.append(Paragraph(f"&bull; {escape(plain[2:])}", styles["Normal"]))
        else:
            story.append(Paragraph(escape(plain), styles["Normal"]))

    _flush_table(table_rows, story)

    doc = SimpleDocTemplate(
        str(out_path),
        pagesize=LETTER,
        rightMargin=36,
        leftMargin=36,
        topMargin=36,
        bottomMargin=36,
    )
    doc.build(story)

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

import pandas as pd
from openpyxl.utils import get_column_letter


@dataclass(frozen=True)
class ExcelFile:
    filename: str
    content: bytes


def build_workbook(
    rows: Sequence[Mapping[str, object]],
    *,
    sheet_name: str,
    filename: str,
    columns: Sequence[str],
    column_width: Optional[int] = None,
) -> ExcelFile:
    """Serialize rows to a single-sheet xlsx held in memory (never written to disk)."""
    df = pd.DataFrame(list(rows), columns=list(columns))

    output = io.BytesIO()
    # Excel caps sheet titles at 31 characters
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name[:31])
        if column_width:
            ws = writer.sheets[sheet_name[:31]]
            for idx in range(1, len(columns) + 1):
                ws.column_dimensions[get_column_letter(idx)].width = column_width

    return ExcelFile(filename=filename, content=output.getvalue())

from __future__ import annotations

import io

from flask import send_file

from ..core.constants import XLSX_MIMETYPE
from .excel import ExcelFile


def send_excel(file: ExcelFile):
    return send_file(
        io.BytesIO(file.content),
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name=file.filename,
    )

"""Entry point: ``python app.py`` (hoặc ``flask --app app run``)."""

import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent
if str(REPO_ROOT / "src" / "hr_records") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src" / "hr_records"))

from hr_records.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=app.config["DEBUG"])

from __future__ import annotations

# Allow running scripts without requiring an editable install (`pip install -e .`).
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_PATH))

import os

import uvicorn

from transithub.api.app import create_app
from transithub.config.loader import load_config


def main() -> None:
    config = load_config()
    app = create_app(config)

    host = os.getenv("TRANSITHUB_HOST", "127.0.0.1")
    port = int(os.getenv("TRANSITHUB_PORT", "8000"))
    # One worker process: the registry lives in this process's memory.
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()

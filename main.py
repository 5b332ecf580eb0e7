"""Thin wrapper so `uvicorn main:app` works from the repository root.

The real application code lives in `lunch_center/main.py`.
"""

from lunch_center.core.config import get_settings
from lunch_center.main import app, handler  # noqa: F401


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=get_settings().PORT,
        reload=True,
    )

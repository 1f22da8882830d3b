"""URL batch service entrypoint."""

from __future__ import annotations

from url_batch import create_app

app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)

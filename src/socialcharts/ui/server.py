"""FastAPI app serving the most recently rendered charts."""

from __future__ import annotations

import json
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

from socialcharts.config import get_output_dir
from socialcharts.runner import LATEST_NAME, STATUS_NAME
from socialcharts.ui.frontend import render_index

MEDIA_TYPES = {".png": "image/png", ".svg": "image/svg+xml"}


def _read_json(path: Path) -> dict:
    if not path.exists():
        raise HTTPException(status_code=404, detail=f"{path.name} not found")
    return json.loads(path.read_text(encoding="utf-8"))


def create_app(output_dir: Path | None = None) -> FastAPI:
    out_root = Path(output_dir or get_output_dir())
    app = FastAPI(title="socialcharts")

    @app.get("/", response_class=HTMLResponse)
    async def root():
        try:
            latest = _read_json(out_root / LATEST_NAME)
        except HTTPException:
            latest = {}
        files = {name: entry["file"] for name, entry in latest.items()}
        return HTMLResponse(render_index(files))

    @app.get("/charts/{filename}")
    async def chart_file(filename: str):
        path = (out_root / filename).resolve()
        if path.parent != out_root.resolve() or path.suffix not in MEDIA_TYPES:
            raise HTTPException(status_code=404, detail=f"{filename} not found")
        if not path.exists():
            raise HTTPException(status_code=404, detail=f"{filename} not found")
        return FileResponse(path, media_type=MEDIA_TYPES[path.suffix])

    @app.get("/api/charts/latest")
    async def latest_json():
        return JSONResponse(content=_read_json(out_root / LATEST_NAME))

    @app.get("/api/health")
    async def health():
        try:
            status = _read_json(out_root / STATUS_NAME)
        except HTTPException as exc:
            return {"status": "degraded", "detail": exc.detail}
        return {"status": "ok" if status.get("success") else "degraded", "charts": status.get("charts", {})}

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)

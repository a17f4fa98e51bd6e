# server.py

import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

from .config import Settings
from .logger import Logger
from .waitlist.csv_store import CsvWaitlistStore, FieldCipher
from .waitlist.errors import StorageError, ValidationError
from .waitlist.models import WaitlistEntry


def _static_file(build_dir: str, path: str) -> Optional[str]:
    """Resolve path inside build_dir, refusing anything that escapes it."""
    root = os.path.realpath(build_dir)
    candidate = os.path.realpath(os.path.join(root, path))
    if candidate != root and not candidate.startswith(root + os.sep):
        return None
    return candidate if os.path.isfile(candidate) else None


def create_app(settings: Optional[Settings] = None, store: Optional[CsvWaitlistStore] = None,
               logger: Optional[Logger] = None) -> FastAPI:
    """
    Build the waitlist HTTP service.

    Args:
        settings: Resolved configuration; read from the environment if None
        store: CSV store to write to; built from settings if None
        logger: Optional Logger instance
    """
    settings = settings or Settings.from_env()
    logger = logger or Logger(__name__)
    store = store or CsvWaitlistStore(settings.csv_path, FieldCipher(settings.encryption_key))

    app = FastAPI()
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.store = store
    app.state.settings = settings

    @app.post("/api/waitlist")
    async def join_waitlist(request: Request):
        try:
            payload = await request.json()
        except ValueError:
            payload = None

        try:
            entry = WaitlistEntry.from_payload(payload, require_name=True)
            await store.add(entry)
        except ValidationError as e:
            return JSONResponse({'success': False, 'message': str(e)}, status_code=400)
        except StorageError as e:
            logger.error(f"Error writing to CSV: {e}")
            return JSONResponse({'success': False, 'message': 'Server error'}, status_code=500)

        logger.debug(f"Waitlist entry stored at {entry.timestamp}")
        return {'success': True, 'message': 'Successfully added to waitlist'}

    @app.get("/{full_path:path}")
    async def serve_app(full_path: str):
        asset = _static_file(settings.build_dir, full_path) if full_path else None
        if asset:
            return FileResponse(asset)
        index = _static_file(settings.build_dir, "index.html")
        if index:
            return FileResponse(index)
        return PlainTextResponse("Not Found", status_code=404)

    return app


def main() -> None:
    settings = Settings.from_env()
    logger = Logger(__name__, logging_enabled=True, log_file='-')
    app = create_app(settings, logger=logger)
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()

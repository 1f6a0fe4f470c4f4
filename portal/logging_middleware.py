"""HTTP audit logging middleware for the gateway."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from time import time
from typing import Optional

from fastapi import FastAPI, Request


def _build_logger(service_name: str, log_dir: Path) -> logging.Logger:
    logger = logging.getLogger(f"audit.{service_name}")
    log_file = Path(os.path.abspath(log_dir / f"{service_name}.log"))
    for existing in list(logger.handlers):
        if isinstance(existing, logging.FileHandler) and Path(existing.baseFilename) == log_file:
            return logger
        # The most recently built app owns the audit log of this process.
        logger.removeHandler(existing)
        existing.close()

    log_dir.mkdir(parents=True, exist_ok=True)
    logger.setLevel(logging.INFO)
    handler = logging.FileHandler(log_file)
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    return logger


def add_audit_middleware(app: FastAPI, service_name: str, log_dir: Path) -> None:
    logger = _build_logger(service_name, Path(log_dir))

    @app.middleware("http")
    async def audit_logger(request: Request, call_next):  # type: ignore[override]
        start = time()
        response = await call_next(request)
        duration_ms = (time() - start) * 1000
        client_ip: Optional[str] = request.client.host if request.client else None
        logger.info(
            "%s %s | status=%s | client=%s | user=%s | duration=%.2fms",
            request.method,
            request.url.path,
            response.status_code,
            client_ip or "unknown",
            request.headers.get("X-Portal-User", "-"),
            duration_ms,
        )
        return response

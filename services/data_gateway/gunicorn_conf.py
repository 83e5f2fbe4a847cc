"""Gunicorn configuration for data_gateway.

Usage:
    gunicorn app.main:app -c gunicorn_conf.py
"""

import os

# ── Server Socket ─────────────────────────────
bind = f"0.0.0.0:{os.getenv('PORT', '3000')}"

# ── Worker Processes ──────────────────────────
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
worker_class = "uvicorn.workers.UvicornWorker"

# ── Timeouts ──────────────────────────────────
timeout = int(os.getenv("GUNICORN_TIMEOUT", "60"))
graceful_timeout = 30
keepalive = 5

# ── Logging ───────────────────────────────────
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

proc_name = "data_gateway"
max_requests = 1000
max_requests_jitter = 50

"""Gunicorn configuration for the Gradebook Insight service.

Usage:
    gunicorn main:app -c deploy/gunicorn.conf.py

Requests are short and CPU-light (statistics over one course's grades), so
the defaults favour throughput over long-lived connections.

The grade store is in-process: every worker holds its own copy.  Run a
single worker unless the store is backed by something shared.
"""

import os

# ─── Server socket ──────────────────────────────────────────────

bind = os.getenv("BIND", "0.0.0.0:5000")
backlog = 2048

# ─── Worker processes ───────────────────────────────────────────

workers = int(os.getenv("WORKERS", 1))
worker_class = "uvicorn.workers.UvicornWorker"

# ─── Timeouts ───────────────────────────────────────────────────

timeout = 30
graceful_timeout = 15
keepalive = 5

# ─── Logging ────────────────────────────────────────────────────

accesslog = "-"                     # stdout
errorlog = "-"                      # stderr
loglevel = os.getenv("LOG_LEVEL", "info")
access_log_format = (
    '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" %(D)sμs'
)

# ─── Process naming ─────────────────────────────────────────────

proc_name = "gradebook-insight"

# ─── Server hooks ───────────────────────────────────────────────


def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info(
        "Starting Gradebook Insight — workers=%d, timeout=%ds, bind=%s",
        workers,
        timeout,
        bind,
    )


def worker_exit(server, worker):
    """Called when a worker has been killed or exited."""
    server.log.info("Worker exit (pid: %s)", worker.pid)

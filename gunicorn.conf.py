"""Gunicorn settings: gunicorn -c gunicorn.conf.py hikelog.main:app"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# One worker: each worker holds its own hike log and /api/reload only refreshes the one that served it
worker_class = "uvicorn.workers.UvicornWorker"
workers = 1

# Startup and /api/reload wait on the sheet fetch (HIKELOG_FETCH_TIMEOUT)
timeout = 60

accesslog = "-"
loglevel = "info"

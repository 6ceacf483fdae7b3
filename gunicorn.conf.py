"""Gunicorn config for deployment: gunicorn -c gunicorn.conf.py parts_api.main:app"""
import os

# Bind to the platform's PORT or default 3000
bind = f"0.0.0.0:{os.environ.get('PORT', '3000')}"

# Uvicorn async workers. Each loads its own copy of the dataset and runs its
# own reloader, so POST /reload only refreshes the worker that receives it.
# Keep a single worker with PARTS_WATCH=1 when every worker must follow the file.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

timeout = 60

# Graceful timeout for shutdown
graceful_timeout = 30

# Keep-alive must exceed the proxy keep-alive (default 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"

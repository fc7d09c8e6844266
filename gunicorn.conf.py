import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Normalizers are pure and tiny; one worker is enough for small hosts.
workers = int(os.environ.get("WEB_CONCURRENCY", "1") or 1)
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30") or 30)

worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "uvicorn.workers.UvicornWorker")
wsgi_app = "app:app"

# gunicorn.conf.py
# gunicorn -c gunicorn.conf.py dietrecipes.app:app
import multiprocessing as mp
import os

from dietrecipes.shared.config.settings import settings

bind = settings.BIND
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.getenv("WEB_CONCURRENCY", mp.cpu_count() * 2 + 1))

# Worker timeout stays above the model call timeout
timeout = settings.LLM_REQUEST_TIMEOUT + 30
graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", "30"))

forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")

accesslog = "-" if os.getenv("ACCESS_LOG", "1") == "1" else None
errorlog = "-"
loglevel = settings.LOG_LEVEL.lower()

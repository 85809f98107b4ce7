"""gunicorn.conf.py takes its bind address and levels from Settings."""

import runpy
from pathlib import Path

from dietrecipes.shared.config.settings import settings

CONF_PATH = Path(__file__).resolve().parent.parent / "gunicorn.conf.py"


def test_bind_and_log_level_come_from_settings():
    conf = runpy.run_path(str(CONF_PATH))

    assert conf["bind"] == settings.BIND
    assert conf["loglevel"] == settings.LOG_LEVEL.lower()
    assert conf["timeout"] > settings.LLM_REQUEST_TIMEOUT
    assert conf["worker_class"] == "uvicorn.workers.UvicornWorker"

import importlib
import logging

import readme_generator
from readme_generator import __main__ as cli
from readme_generator import config


def test_main_serves_the_api(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(config, "get_config", lambda: config.Config(server=config.ServerConfig(host="127.0.0.1", port=9001)))

    cli.main()

    assert calls == [("readme_generator.api:app", {"host": "127.0.0.1", "port": 9001})]


def test_logging_setup_ignores_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "not-a-level")
    importlib.reload(readme_generator)
    for name in ("httpx", "openai", "git"):
        assert logging.getLogger(name).level == logging.WARNING

"""habitlog application factory."""

from __future__ import annotations

from datetime import date
from importlib import import_module
from typing import Callable, Iterable

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestConfig, resolve_config
from .domain.repositories import HabitStore
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths to register."""

    yield "habitlog.blueprints.habits"


def create_app(
    config: str | BaseConfig | None = None,
    *,
    store: HabitStore | None = None,
    clock: Callable[[], date] | None = None,
) -> Flask:
    """Create and configure the Flask application instance.

    ``config`` is an environment name (``development``, ``testing``) or a
    config instance. ``store`` and ``clock`` override the configured store and
    the UTC "today" used for statistics.
    """

    app = Flask(__name__, instance_relative_config=True)
    config_obj = config if isinstance(config, BaseConfig) else resolve_config(config)()
    app.config.from_object(config_obj)
    app.config["HABITLOG_CONFIG"] = config_obj

    setup_logging(config_obj)
    _register_blueprints(app)
    _register_error_handlers(app)

    from .extensions import init_store

    init_store(app, store=store, clock=clock)
    _cli.init_app(app)
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


def _register_error_handlers(app: Flask) -> None:
    """Render HTTP errors and unexpected failures as JSON."""

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return jsonify({"error": exc.description or exc.name}), exc.code or 500

    @app.errorhandler(Exception)
    def _unexpected_error(exc: Exception):
        logger.exception("Unhandled error while serving request")
        return jsonify({"error": "Internal server error"}), 500


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]

"""SalesTally: sales entry form/list client and its reference backend."""

from __future__ import annotations

import os
from importlib import import_module
from typing import Iterable

from flask import Flask

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestingConfig

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestingConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    yield "salestally.blueprints.sales"


def create_app(config: BaseConfig | str | None = None) -> Flask:
    """Create the Flask app serving the ``/sales`` collection.

    ``config`` may be a config instance, an environment name
    (``development``/``testing``), or None to read ``SALESTALLY_ENV``.
    """

    if isinstance(config, BaseConfig):
        config_obj = config
    else:
        config_obj = _resolve_config(config or os.getenv("SALESTALLY_ENV"))()

    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_obj)
    app.config["SALESTALLY_CONFIG"] = config_obj

    _register_blueprints(app)
    # Deferred so importing the package does not build SQLModel mappers.
    from .extensions import init_db

    init_db(app)
    _cli.init_app(app)
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


__all__ = ["BaseConfig", "DevConfig", "TestingConfig", "create_app"]

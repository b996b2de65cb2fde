"""The application-wide container of logger, configuration and validator."""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from simplejrpc.config.base import Config
from simplejrpc.config.file_adapter import load_config
from simplejrpc.config.formatter import Formatter
from simplejrpc.glog.log_config import load_log_config
from simplejrpc.glog.logger import GLogger, new_logger
from simplejrpc.gvalid.rules import MinLengthValidator, RangeValidator, RequiredValidator
from simplejrpc.gvalid.visitor import ValidatorVisitor
from simplejrpc.gvalid.walker import StructWalker


@dataclass
class Container:
    """Holds the core dependencies shared across an application."""

    logger: logging.Logger | None = None
    config: Config | None = None
    valid: StructWalker | None = None

    def clone(self, **kwargs: object) -> Container:
        """Return a copy with the given attributes replaced."""
        return dataclasses.replace(self, **kwargs)

    def glog(self) -> GLogger:
        """Return the logger wrapped to add stack traces to errors."""
        if self.logger is None:
            raise RuntimeError("container has no logger")
        return GLogger(self.logger)

    def cfg_fmt(self) -> Formatter:
        """Return the formatter for reading configuration values."""
        if self.config is None:
            raise RuntimeError("container has no configuration")
        return self.config.cfg()


_container: Container | None = None


def init_container(
    *args: Callable[[Config], None],
    root_path: str | os.PathLike[str] | None = None,
) -> Container:
    """Load configuration, build the logger and validator, and install the container.

    Each positional argument is an option applied to the loaded config.
    Raises ConfigError when the configuration or its ``logger`` section is
    missing, ValueError when the logger settings are malformed and OSError
    when the log directory cannot be created.
    """
    global _container
    config = load_config(root_path)
    for option in args:
        option(config)

    logger_settings = config.cfg().get_value("logger").map()
    logger = new_logger(load_log_config(logger_settings))

    visitor = ValidatorVisitor()
    visitor.register_validator("required", RequiredValidator())
    visitor.register_validator("min_length", MinLengthValidator())
    visitor.register_validator("range", RangeValidator())
    walker = StructWalker(visitor, "validate")

    _container = Container(logger=logger, config=config, valid=walker)
    return _container


def get_container() -> Container:
    """Return the installed container; RuntimeError if none was initialized."""
    if _container is None:
        raise RuntimeError("container is not initialized")
    return _container


def get_config_string(section: str) -> str:
    """Return the string at ``section``, or "" when it is missing."""
    return get_container().cfg_fmt().get_value(section).string_without_err()


def require_config_string(section: str) -> str:
    """Return the string at ``section``; ConfigError when it is missing."""
    return get_container().cfg_fmt().get_value(section).string()
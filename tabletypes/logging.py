# -*- coding: utf-8 -*-
from logging import * # allow this module as a passthrough for builtin logging
import logging
import sys


def get_loggers(prefix=""):
    """Return loggers matching prefix or all loggers if prefix is empty

    :params prefix: str, the logger prefix to filter returned loggers
    :returns: dict[str, logging.Logger]
    """
    loggers = Logger.manager.loggerDict
    if prefix:
        loggers = {}
        for logname, logger in Logger.manager.loggerDict.items():
            if logname.startswith(prefix):
                loggers[logname] = logger

    return loggers


def setdefault(name, val):
    """Set the default logging level for name to val, this will only be set if
    it wasn't configured previously

    :param name: str, the logger name
    :param val: str|int, the logger level (eg, "DEBUG", "INFO")
    """
    if name not in Logger.manager.loggerDict:
        if isinstance(val, (str, int)):
            logger = getLogger(name)
            logger.setLevel(getLevelName(val.upper() if isinstance(val, str) else val))

        else:
            raise NotImplementedError("Not sure what to do with val")


def null_config(name):
    """Configure a null handler for name so a library's records don't trigger
    the "no handler found" fallback when the application never configured
    logging

    :param name: str, usually __name__
    """
    logging.getLogger(name).addHandler(logging.NullHandler())


def quick_config(levels=None, **kwargs):
    """Add a basic root handler and optionally fine-tune some loggers

    :example:
        from tabletypes import logging
        logging.quick_config(
            levels={
                "tabletypes": "WARNING",
            }
        )

    :param levels: dict[str, str], the key is the logger name and the value is
        the level. This can also be a list[tuple] where the tuple is (name,
        level)
    :param **kwargs: key/val, these will be passed into logger.basicConfig
        method
        * verbose_format: bool, pass in True to set the "format" key to a format
            that contains a lot more information
    """
    levels = levels or {}
    verbose = kwargs.pop("verbose_format", False)

    if verbose:
        kwargs.setdefault(
            "format",
            "|".join([
                '[%(levelname).1s',
                '%(asctime)s',
                '%(name)s', # logger name
                '%(pathname)s:%(lineno)s] %(message)s',
            ])
        )

    else:
        kwargs.setdefault("format", "[%(levelname).1s] %(message)s")

    kwargs.setdefault("level", logging.DEBUG)
    kwargs.setdefault("stream", sys.stdout)
    logging.basicConfig(**kwargs)

    if isinstance(levels, dict):
        levels = levels.items()

    for logger_name, logger_level in levels:
        l = logging.getLogger(logger_name)
        if isinstance(logger_level, str):
            logger_level = getattr(logging, logger_level.upper())
        l.setLevel(logger_level)
basic_logging = quick_config


class LogMixin(object):
    """A mixin that gives a class logging methods that write to the logger of
    the module the class was defined in

    The tables use this as their diagnostics channel, suspicious-but-legal
    calls (like appending nothing) are reported through .log_warning()
    """
    @classmethod
    def get_logger_instance(cls, instance_name="logger", **kwargs):
        """Get the logger for this class

        :param instance_name: str, the name of the module level variable defined
            in the module that the child class resides. If this doesn't exist
            then a new instance will be created using the module classpath
        :returns: Logger instance
        """
        module_name = cls.__module__
        module = sys.modules[module_name]
        return getattr(module, instance_name, None) or getLogger(module_name)

    @classmethod
    def get_log_level(cls, level=NOTSET, **kwargs):
        """Get the numeric log level

        :param level: str|int, the level name (eg, "DEBUG") or the level
        :returns: int, the internal logging log level
        """
        if level == NOTSET:
            level = kwargs.get("default_level", "DEBUG")

        if not isinstance(level, int):
            # getLevelName() returns int if passed in arg is string
            level = getLevelName(level.upper())
        return level

    @classmethod
    def is_logging(cls, level, **kwargs):
        """Wrapper around logger.isEnabledFor

        :param level: str|int, the logging level we want to check
        :returns: bool, True if the level has logging enabled
        """
        level = cls.get_log_level(level, **kwargs)
        logger = cls.get_logger_instance(**kwargs)
        return logger.isEnabledFor(level)

    def get_log_message(self, format_str, *format_args, **kwargs):
        """Returns the logging message that will be logged using .log()"""
        if format_args:
            return format_str.format(*format_args)

        else:
            return format_str

    def log(self, format_str, *format_args, **kwargs):
        """wrapper around the module's logger

        :param format_str: str|list[str], the message to log, if this is a list
            then it will be joined with a space
        :param *format_args: list, if format_str is a string containing {},
            then format_str.format(*format_args) is ran
        :param **kwargs:
            level: str|int, something like logging.DEBUG or "DEBUG"
        """
        logger = self.get_logger_instance(**kwargs)
        if isinstance(format_str, list):
            format_str = " ".join(filter(None, format_str))

        level = self.get_log_level(kwargs.pop("level", NOTSET), **kwargs)
        if self.is_logging(level):
            logger.log(
                level,
                self.get_log_message(format_str, *format_args, **kwargs)
            )

    def log_warning(self, *args, **kwargs):
        kwargs["level"] = "WARNING"
        return self.log(*args, **kwargs)

    def log_debug(self, *args, **kwargs):
        kwargs["level"] = "DEBUG"
        return self.log(*args, **kwargs)

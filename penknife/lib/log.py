"""
Debug logging for the template engine.

`LOG` writes through a loguru logger bound to ``app="PENKNIFE"`` and is
silent while `appsettings.beQuiet` is set, which is the default. Set
``PNK_BEQUIET=false`` to trace tokenizing, loops and marker changes.
"""

from loguru import logger
from typing import Any
import sys

app_logger = logger.bind(app="PENKNIFE")

app_logger.remove()
app_logger.add(
    sys.stderr,
    format=(
        "<green>{time:HH:mm:ss}</green> │ "
        "<level>{level: <5}</level> │ "
        "<cyan>{module}.{function}:{line}</cyan> ║ "
        "<level>{message}</level>"
    ),
    filter=lambda record: record["extra"].get("app") == "PENKNIFE",
)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Log a debug message unless `beQuiet` is set.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from penknife.config.settings import appsettings  # read at call time

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)

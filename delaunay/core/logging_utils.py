"""Package loggers.

Every module logs through ``get_logger`` so records land under the
``delaunay`` namespace. Nothing is printed until ``configure_logging`` is
called; the process root logger is never touched.
"""
from __future__ import annotations

import logging
import sys
from typing import Union

_ROOT = 'delaunay'


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, prefixed with ``delaunay.`` when it is not already."""
    if name != _ROOT and not name.startswith(_ROOT + '.'):
        name = f'{_ROOT}.{name}'
    return logging.getLogger(name)


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Print ``delaunay`` records to stdout at ``level``.

    Repeated calls only change the level. Unknown level names mean INFO.
    """
    log = logging.getLogger(_ROOT)
    if not any(isinstance(h, logging.StreamHandler) for h in log.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        # replaces the NullHandler installed on import
        log.handlers[:] = [handler]
    log.propagate = False
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    log.setLevel(level)
    if level <= logging.DEBUG:
        # matplotlib font lookup floods DEBUG output
        logging.getLogger('matplotlib').setLevel(logging.INFO)


__all__ = ['get_logger', 'configure_logging']

"""
Opt-in logging for mdcode operations.

Every public operation accepts ``logger=None, log=False`` and calls
``resolve_logger`` once on entry:

    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    log.debug("found %d block(s)", len(spans))

Nothing is printed and nothing is configured globally. Without a logger or
``log=True`` the shared NoopLogger drops every record, so the library stays
silent unless a caller asks for output.
"""
from __future__ import annotations

import logging
from typing import Union

ROOT_NAME = "mdcode"


class NoopLogger:
    """Accepts the logging.Logger call surface and discards everything."""

    def _discard(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        return None

    debug = info = warning = error = exception = critical = _discard

    def isEnabledFor(self, level: int) -> bool:
        return False


_NOOP = NoopLogger()

LoggerLike = Union[logging.Logger, NoopLogger]


def resolve_logger(
    logger: LoggerLike | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> LoggerLike:
    """
    Pick the logger an operation writes to.

    A caller-supplied logger wins and is also how a NoopLogger travels from
    `walk` down to the fence scanner and the rewriter. With `enabled`, the
    module logger under the "mdcode" hierarchy is returned at `level`,
    propagating to the root so pytest's caplog sees it.
    """
    if logger is not None:
        return logger
    if not enabled:
        return _NOOP
    lg = logging.getLogger(name or ROOT_NAME)
    lg.setLevel(level)
    lg.propagate = True
    return lg

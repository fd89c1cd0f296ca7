# src/bosh/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..cli.commands import EXIT_COMMAND, handle
from ..cli.formatting import box, format_error, format_reply
from ..core.ports import Emitter, LineSource
from ..core.state import AppState
from ..errors import BoshError

logger = logging.getLogger(__name__)

GOODBYE = "Bye. Hope to see you again soon!"


def handle_line(state: AppState, line: str) -> str:
    """
    Single dispatch boundary: one line in, one formatted block out.
    Never raises; a bad command must not end the session.
    """
    try:
        reply = handle(line, state.tasks)
    except BoshError as e:
        logger.debug("Command rejected: %s", e)
        return format_error(str(e))
    except Exception as e:
        logger.exception("Command handler crashed.")
        return format_error(f"Uh oh, something went wrong: {type(e).__name__}")
    return format_reply(reply)


def stdin_lines(prompt: str = "") -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            return
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            return


def run_console_loop(
    state: AppState,
    lines: LineSource | None = None,
    emit: Emitter = print,
) -> None:
    app_name = str(getattr(state.settings, "app_name", "Bosh"))
    logger.info("Console connector started (tasks=%d).", state.tasks.size())

    emit(box(f"Hello! I'm {app_name}", "What can I do for you?"))
    for notice in state.notices:
        emit(format_error(notice))

    for raw in lines if lines is not None else stdin_lines():
        line = raw.strip()
        if line == EXIT_COMMAND:
            logger.info("Console exit command received.")
            emit(box(GOODBYE))
            break
        emit(handle_line(state, line))

    logger.info("Console connector finished.")

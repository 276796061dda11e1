# src/tasktrack/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import Ask, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_WORDS = ("0", "exit", "quit", "q")


def run_console_loop(state: AppState, ask: Ask = input) -> None:
    """
    Menu REPL: read a choice, run the action, print its reply.

    Ends on the exit choice, EOF or Ctrl+C.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())

    def emit(text: str) -> None:
        print(text, flush=True)

    print(command_registry.build_help())

    while True:
        try:
            choice = ask("\nYour choice: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not choice:
            continue

        if choice.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            print("Bye.")
            break

        try:
            reply = command_registry.handle(state, choice, ask, emit=emit)
        except EOFError:
            logger.info("Console EOF received during a command, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Command interrupted.")
            print("\nCancelled.")
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        print(reply)

    logger.info("Console connector finished.")

"""rawedit entry point.

Allows running via `python -m rawedit` and provides the console script
defined in `pyproject.toml`. Takes no arguments; press ESC to quit.
"""

from __future__ import annotations

import logging
import sys
import traceback

from .constants import DebugSettings, EditorConstants


def configure_logging(settings: DebugSettings) -> None:
    """Send log records to the configured file; the terminal belongs to the editor."""
    if not settings.log_file:
        return
    logging.basicConfig(
        filename=settings.log_file,
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    settings = DebugSettings.from_environ()
    configure_logging(settings)

    # Lazy import so a broken terminal stack still reports cleanly
    from .editor import Editor
    from .terminal import TerminalError

    try:
        Editor().run()
    except TerminalError as e:
        logging.getLogger(__name__).error("Fatal terminal error", exc_info=True)
        if settings.debug:
            traceback.print_exc()
        raise SystemExit(EditorConstants.FATAL_ERROR_MESSAGE.format(e)) from e


if __name__ == "__main__":  # pragma: no cover
    main()

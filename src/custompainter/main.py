"""
Application Initialization
==========================
This module wires up logging, the Qt application and the main window, and
starts the Qt Event Loop.
"""
import logging
import sys

from custompainter.app.application import create_app
from custompainter.app.ui.main_window import MainWindow
from custompainter.config import LOG_LEVEL, LOG_FILE
from custompainter.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    app = create_app()

    window = MainWindow()
    window.show()
    logger.info("Main window shown.")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

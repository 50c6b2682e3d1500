"""
Configuration & Global Constants
================================
This module serves as the central registry for application identity and the
layout of the demo screen.

Exports:
    ORG_ID, APP_ID, ORG_DOMAIN: Identifiers handed to QCoreApplication.
    VISIBLE_APP_NAME: Window title / display name.
    SLOT_SIZE: Fixed size (px) of the first painter slot.
    CONTAINER_PADDING: Padding (px) between the gray frame and the second painter.
    CONTAINER_COLOR, CANVAS_BACKGROUND: Colors of the second slot.
    LOG_LEVEL, LOG_FILE: Handed to setup_logging() at startup.
"""

import logging

ORG_ID = "adematici"
APP_ID = "custom-painter"
ORG_DOMAIN = "com.adematici"

VISIBLE_APP_NAME = "Custom Painter"

# Screen layout
SLOT_SIZE: int = 100
CONTAINER_PADDING: int = 30
CONTAINER_COLOR: str = "#888888"
CANVAS_BACKGROUND: str = "#FFFF00"

# Logging
LOG_LEVEL: int = logging.INFO
LOG_FILE: str | None = None  # e.g. "custompainter.log"

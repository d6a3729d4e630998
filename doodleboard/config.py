# env vars + constants
import os

SERVICE_NAME = os.getenv("SERVICE_NAME", "doodleboard")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()

MAX_CANVAS_PIXELS = int(os.getenv("MAX_CANVAS_PIXELS", "4000000"))
UNDO_DEPTH = int(os.getenv("UNDO_DEPTH", "20"))
DEFAULT_BACKGROUND = os.getenv("DEFAULT_BACKGROUND", "#ffffff")
MAX_CANVASES = int(os.getenv("MAX_CANVASES", "64"))

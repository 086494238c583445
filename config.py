# config.py
import logging
import os

from dotenv import load_dotenv

from responder_data import DATA_DIR

load_dotenv()

RESPONSES_FILE = os.getenv("RESPONSES_FILE") or os.path.join(DATA_DIR, "responses.txt")
DEFAULT_RESPONSES_FILE = os.getenv("DEFAULT_RESPONSES_FILE") or os.path.join(DATA_DIR, "default.txt")
DEBUG = os.getenv("RESPONDER_DEBUG", "0").lower() in ("1", "true", "yes")


def configure_logging(debug: bool = DEBUG) -> None:
    """Configure root logging; DEBUG level when debug is set."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

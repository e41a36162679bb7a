import logging
import os
import sys

TRUTHY = ("1", "true", "yes", "on")


def debug_enabled():
    return os.environ.get("HOSTPING_DEBUG", "").strip().lower() in TRUTHY


def setup_logging(level="WARNING", debug=False):
    """
    Simple logging setup.
    - Uses HOSTPING_LOG_LEVEL if set
    - HOSTPING_DEBUG or debug=True forces DEBUG and logs to stdout, next to
      the result line (raw ping output is logged)
    - Doesn't reconfigure if handlers already exist
    """
    root = logging.getLogger()
    if root.handlers:
        return

    stream = sys.stderr
    if debug or debug_enabled():
        level_value = logging.DEBUG
        stream = sys.stdout
    else:
        level_name = os.environ.get("HOSTPING_LOG_LEVEL", level).upper()
        level_value = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level_value,
        stream=stream,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

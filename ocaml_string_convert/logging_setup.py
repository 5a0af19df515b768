import logging
import sys


def setup_logging(level=logging.WARNING):
    """Setup basic logging configuration"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        stream=sys.stderr,
    )
    return logging.getLogger("ocaml_string_convert")

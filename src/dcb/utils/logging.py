from __future__ import annotations
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

def setup_logging(level: str = "WARNING") -> None:
    # stdout carries the report, so log records go to stderr
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)

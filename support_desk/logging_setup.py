"""Process-wide logging configuration, called once by each entry point."""

import logging

from support_desk.config import Settings, settings


def configure_logging(cfg: Settings = settings) -> None:
    level = logging.DEBUG if cfg.debug else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=cfg.log_format)

# Simple logging util.

import logging
import pathlib
from typing import Optional

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(message)s'


def init_game_log(title: str, lvl: int = logging.WARNING, log_path: Optional[str] = None) -> None:
    # stderr unless a log file is given; stdout carries the frames
    kwargs = dict(level=lvl, format=LOG_FORMAT, force=True)
    if log_path:
        pathlib.Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        kwargs['filename'] = log_path
    logging.basicConfig(**kwargs)
    logging.getLogger(__name__).info('Game of life [%s] started logging at %s.',
                                     title, log_path or '<stderr>')

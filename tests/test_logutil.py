import logging

from lifegrid.logutil import init_game_log


def test_init_game_log_writes_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_path = tmp_path / "logs" / "gamelife.log"
    try:
        init_game_log('unit test', logging.INFO, str(log_path))
        logging.getLogger('lifegrid.test').warning('hello')
        for handler in root.handlers:
            handler.flush()
        text = log_path.read_text()
        assert 'Game of life [unit test] started logging' in text
        assert '| WARNING | hello' in text
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)

import logging

import numpy as np
import pytest

from lifegrid.utils.game_of_life import MARGIN
from lifegrid.utils.patterns import (
    GLIDER,
    GLIDER_GUN,
    OSCILLATOR,
    PATTERNS,
    get_all_patterns,
    load_pattern,
    pattern_size,
    pattern_to_array,
    resolve_pattern_name,
)


def test_known_patterns():
    assert set(PATTERNS) == {'oscillator', 'glider', 'gun'}
    assert len(OSCILLATOR) == 3
    assert len(GLIDER) == 5
    assert len(GLIDER_GUN) == 36
    assert len(set(GLIDER_GUN)) == 36


def test_gun_layout():
    assert GLIDER_GUN[:4] == ((0, 4), (0, 5), (1, 4), (1, 5))
    assert GLIDER_GUN[-4:] == ((34, 2), (34, 3), (35, 2), (35, 3))
    assert pattern_size('gun') == (36, 9)


def test_load_translates_by_margin_and_offset():
    cells = load_pattern('glider', 3, 7)
    assert cells == [(x + MARGIN + 3, y + MARGIN + 7) for x, y in GLIDER]
    assert cells[0].x == MARGIN + 3
    assert cells[0].y == MARGIN + 7 + 2


def test_load_keeps_pattern_order():
    assert load_pattern('gun') == [(x + MARGIN, y + MARGIN) for x, y in GLIDER_GUN]


@pytest.mark.parametrize("alias,name", [
    ('o', 'oscillator'),
    ('blinker', 'oscillator'),
    ('g', 'glider'),
    ('u', 'gun'),
    ('glider_gun', 'gun'),
    ('gun', 'gun'),
])
def test_aliases(alias, name):
    assert resolve_pattern_name(alias) == name
    assert load_pattern(alias, 1, 2) == load_pattern(name, 1, 2)


def test_unknown_pattern_is_empty(caplog):
    with caplog.at_level(logging.WARNING):
        assert load_pattern('x', 4, 4) == []
    assert "Pattern 'x' not found" in caplog.text
    assert resolve_pattern_name('x') is None


def test_pattern_to_array():
    arr = pattern_to_array('glider')
    expected = np.array([
        [0, 1, 0],
        [0, 0, 1],
        [1, 1, 1]
    ], dtype=np.uint8)
    assert np.array_equal(arr, expected)
    assert pattern_to_array('u').sum() == 36


def test_pattern_helpers_reject_unknown_ids():
    with pytest.raises(ValueError):
        pattern_size('nope')
    with pytest.raises(ValueError):
        pattern_to_array('nope')


def test_get_all_patterns():
    patterns = get_all_patterns()
    assert list(patterns) == ['oscillator', 'glider', 'gun']
    assert patterns['oscillator'].shape == (3, 2)

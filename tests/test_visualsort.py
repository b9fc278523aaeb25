import random

import pytest

from pixelworks.surface import Surface
from pixelworks.visualsort import (
    bubble_sort,
    draw_bars,
    draw_column,
    generate_tab,
    main,
    partition,
    quick_sort,
)


def test_generate_tab_is_permutation():
    values = generate_tab(50, random.Random(2))
    assert sorted(values) == list(range(50))


def test_generate_tab_reproducible():
    first = generate_tab(20, random.Random(9))
    second = generate_tab(20, random.Random(9))
    assert len(first) == 20
    assert sorted(first) == list(range(20))
    assert first == second


def test_generate_tab_negative():
    with pytest.raises(ValueError):
        generate_tab(-1)


def test_bubble_sort_swaps_adjacent():
    values = generate_tab(30, random.Random(4))
    swaps = []
    count = bubble_sort(values, lambda i, j: swaps.append((i, j)))
    assert values == list(range(30))
    assert count == len(swaps)
    assert all(j == i + 1 for i, j in swaps)


def test_bubble_sort_sorted_input_needs_no_swap():
    values = [1, 2, 3]
    assert bubble_sort(values) == 0
    assert values == [1, 2, 3]


def test_partition_places_pivot():
    values = [7, 2, 9, 4, 5]
    place = partition(values, 0, 4)
    assert values[place] == 5
    assert all(v <= 5 for v in values[:place])
    assert all(v > 5 for v in values[place + 1:])
    assert sorted(values) == [2, 4, 5, 7, 9]


def test_quick_sort_sorts_and_reports_valid_indices():
    values = generate_tab(64, random.Random(8))
    seen = []
    quick_sort(values, 0, len(values) - 1, lambda i, j: seen.append((i, j)))
    assert values == list(range(64))
    assert seen
    assert all(0 <= i < 64 and 0 <= j < 64 for i, j in seen)


def test_quick_sort_long_sorted_input():
    values = list(range(3000))
    quick_sort(values)
    assert values == list(range(3000))


def test_quick_sort_empty():
    values = []
    quick_sort(values)
    assert values == []


def test_draw_column():
    surface = Surface(1, 4)
    draw_column(surface, 0, 2)
    white = surface.map_rgb(255, 255, 255)
    black = surface.map_rgb(0, 0, 0)
    assert [surface.get_pixel(0, y) for y in range(4)] == [black, black, white, white]


def test_draw_bars_extremes():
    surface = Surface(3, 3)
    draw_bars(surface, [0, 3, 1])
    white = surface.map_rgb(255, 255, 255)
    black = surface.map_rgb(0, 0, 0)
    assert all(surface.get_pixel(0, y) == black for y in range(3))
    assert all(surface.get_pixel(1, y) == white for y in range(3))
    assert surface.get_pixel(2, 2) == white
    assert surface.get_pixel(2, 0) == black


@pytest.mark.parametrize("argv", [[], ["1", "2"], ["abc"], ["0"], ["-3"]])
def test_main_rejects_bad_arguments(argv):
    assert main(argv) == 1
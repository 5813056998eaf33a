from unittest import mock

from heartmaze.placement import ItemPlacer


def test_same_seed_gives_same_sequence():
    a = ItemPlacer(7)
    b = ItemPlacer(7)
    assert [(a.pos_x(), a.pos_y()) for _ in range(50)] == [
        (b.pos_x(), b.pos_y()) for _ in range(50)
    ]


def test_pos_x_range():
    placer = ItemPlacer(3)
    values = {placer.pos_x() for _ in range(2000)}
    assert min(values) >= 2
    assert max(values) <= 23
    assert 3 not in values


def test_pos_x_even_values_stay_and_odd_values_shift():
    placer = ItemPlacer(11)
    values = {placer.pos_x() for _ in range(2000)}
    odd = {v for v in values if v % 2}
    even = {v for v in values if v % 2 == 0}
    assert even and all(2 <= v <= 20 for v in even)
    assert odd and all(5 <= v <= 23 for v in odd)


def test_pos_y_range():
    placer = ItemPlacer(5)
    values = {placer.pos_y() for _ in range(2000)}
    assert values == set(range(20))


def test_default_seed_comes_from_clock():
    with mock.patch("heartmaze.placement.time.time", return_value=1234.5):
        placer = ItemPlacer()
    assert placer.seed == 1234 % 20
    reference = ItemPlacer(placer.seed)
    assert [placer.pos_y() for _ in range(10)] == [reference.pos_y() for _ in range(10)]


def test_default_seed_is_below_twenty():
    for now in (0.0, 19.9, 20.0, 987654.0):
        with mock.patch("heartmaze.placement.time.time", return_value=now):
            assert 0 <= ItemPlacer().seed < 20
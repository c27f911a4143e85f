import pytest

from problemset.scheduling import factory_machines, room_allocation, traffic_lights


def test_traffic_lights_worked_example():
    assert traffic_lights(8, [3, 6, 2]) == [5, 3, 3]


def test_traffic_lights_results_never_grow():
    result = traffic_lights(100, [50, 10, 90, 30, 70, 20, 60])
    assert len(result) == 7
    assert all(a >= b for a, b in zip(result, result[1:]))
    assert all(0 < value <= 100 for value in result)


def test_traffic_lights_no_lights_gives_nothing():
    assert traffic_lights(10, []) == []


@pytest.mark.parametrize("position", [-1, 8, 20])
def test_traffic_lights_rejects_positions_off_the_street(position):
    with pytest.raises(ValueError):
        traffic_lights(8, [position])


def test_traffic_lights_rejects_empty_street():
    with pytest.raises(ValueError):
        traffic_lights(0, [])


def test_room_allocation_worked_example():
    assert room_allocation([(1, 2), (2, 4), (4, 4)]) == (2, [1, 2, 1])


def _check_allocation(customers, allocation):
    assert len(allocation.assignment) == len(customers)
    assert set(allocation.assignment) == set(range(1, allocation.rooms + 1))
    by_room = {}
    for (arrive, leave), room in zip(customers, allocation.assignment):
        by_room.setdefault(room, []).append((arrive, leave))
    for stays in by_room.values():
        stays.sort()
        for (_, leave), (arrive, _) in zip(stays, stays[1:]):
            assert leave < arrive


def test_room_allocation_rooms_never_double_booked():
    customers = [(5, 9), (1, 3), (2, 6), (4, 4), (7, 8), (10, 12), (3, 5)]
    allocation = room_allocation(customers)
    _check_allocation(customers, allocation)


def test_room_allocation_disjoint_stays_share_one_room():
    customers = [(1, 1), (2, 2), (3, 3)]
    allocation = room_allocation(customers)
    assert allocation.rooms == 1
    assert allocation.assignment == [1, 1, 1]


def test_room_allocation_overlapping_stays_need_separate_rooms():
    customers = [(1, 10)] * 4
    allocation = room_allocation(customers)
    assert allocation.rooms == len(customers)
    _check_allocation(customers, allocation)


def test_factory_machines_worked_example():
    assert factory_machines([3, 2, 5], 5) == 6


@pytest.mark.parametrize(
    "times, products",
    [([2, 3, 7], 7), ([1], 10), ([4, 4, 4], 13), ([5, 9, 11, 2], 37)],
)
def test_factory_machines_returns_least_sufficient_time(times, products):
    result = factory_machines(times, products)
    assert sum(result // t for t in times) >= products
    assert sum((result - 1) // t for t in times) < products


def test_factory_machines_zero_products_take_no_time():
    assert factory_machines([3, 4], 0) == 0


def test_factory_machines_rejects_no_machines():
    with pytest.raises(ValueError):
        factory_machines([], 3)


def test_factory_machines_rejects_non_positive_times():
    with pytest.raises(ValueError):
        factory_machines([2, 0], 3)
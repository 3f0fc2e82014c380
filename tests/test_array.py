import pytest

from xcore.array import Array

MAX_CAPACITY = 17


def create_element(number):
    odd = number & 1
    return (number if odd else -number, -number if odd else number, number)


def filled(capacity, count, base=0):
    array = Array(capacity)
    for i in range(count):
        array.push_back(create_element(base + i))
    return array


def check_elements(array, base, reverse):
    total = len(array)
    for i, element in enumerate(array):
        number = base + (total - i - 1 if reverse else i)
        assert element == create_element(number)
        assert array[i] == create_element(number)


def test_empty_container():
    array = Array(0)
    assert [array.capacity(), len(array), array.empty(), array.full()] == [
        0,
        0,
        True,
        True,
    ]


def test_random_access():
    array = filled(MAX_CAPACITY, MAX_CAPACITY)
    assert array.capacity() == MAX_CAPACITY
    assert len(array) == MAX_CAPACITY
    assert array.empty() is False
    assert array.full() is True
    check_elements(array, 0, False)

    for forward in range(MAX_CAPACITY // 2):
        backward = MAX_CAPACITY - forward - 1
        array[forward], array[backward] = array[backward], array[forward]

    check_elements(array, 0, True)

    array.clear()
    assert len(array) == 0
    assert array.empty() is True
    assert array.full() is False


def test_element_erasure():
    array = filled(MAX_CAPACITY, MAX_CAPACITY)

    half = MAX_CAPACITY // 2
    for _ in range(half):
        array.erase(0)
    assert len(array) == MAX_CAPACITY - half
    check_elements(array, half, False)

    for _ in range(MAX_CAPACITY - half):
        array.erase(0)
    assert len(array) == 0


def test_element_insertion():
    array = Array(MAX_CAPACITY)

    for i in range(0, MAX_CAPACITY, 2):
        array.insert(len(array), create_element(i))
    for i in range(1, MAX_CAPACITY, 2):
        array.insert(i, create_element(i))

    assert len(array) == MAX_CAPACITY
    check_elements(array, 0, False)


def test_push_pop_sequence():
    array = filled(MAX_CAPACITY, MAX_CAPACITY)
    assert len(array) == MAX_CAPACITY
    check_elements(array, 0, False)

    number = len(array) - 1
    while len(array):
        assert array.back() == create_element(number)
        assert array.pop_back() == create_element(number)
        number -= 1
    assert len(array) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError, match="negative capacity"):
        Array(-1)


@pytest.mark.parametrize(
    "action",
    [
        lambda array: array.push_back(create_element(5)),
        lambda array: array.insert(0, create_element(5)),
    ],
)
def test_push_to_full_array_raises(action):
    array = filled(2, 2)
    with pytest.raises(OverflowError):
        action(array)
    assert list(array) == [create_element(0), create_element(1)]


@pytest.mark.parametrize(
    "action",
    [
        lambda array: array.back(),
        lambda array: array.pop_back(),
        lambda array: array.erase(0),
        lambda array: array[0],
    ],
)
def test_empty_array_access_raises(action):
    with pytest.raises(IndexError):
        action(Array(3))


def test_insert_beyond_size_raises():
    array = filled(4, 1, base=1)
    with pytest.raises(IndexError):
        array.insert(2, create_element(2))


def test_negative_index_reads_from_end():
    array = filled(MAX_CAPACITY, 5)
    assert array[-1] == create_element(4)
    array[-1] = create_element(9)
    assert array.back() == create_element(9)
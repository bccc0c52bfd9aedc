import pytest

from clists.dlist import DList, DListNode
from clists.slist import ListIntegrityError

INT_SIZE = 4
DATA = [32422, 214235, 23452512, -3432212]


def build(*items, size=INT_SIZE):
    dl = DList(size)
    for item in items:
        dl.append(item)
    return dl


def expect(dl, items):
    """Verify the list, then compare it forwards, backwards and by index."""
    items = list(items)
    dl.verify()
    assert len(dl) == len(items)
    assert list(dl) == items
    assert list(reversed(dl)) == items[::-1]
    assert [dl.get(i) for i in range(len(items))] == items


@pytest.mark.parametrize("size", [4, 8, 16, 56])
def test_new_list_is_empty(size):
    dl = DList(size)
    assert dl.size == size
    assert (dl.head, dl.tail, dl.first(), dl.last()) == (None, None, None, None)
    expect(dl, [])


def test_length_follows_basic_ops():
    dl = DList(4)
    operations = [
        (dl.append, 1),
        (dl.prepend, 2),
        (dl.prepend, 3),
        (lambda: dl.remove(1), 2),
        (dl.pop, 1),
        (dl.purge, 0),
    ]
    for operation, length in operations:
        operation()
        assert len(dl) == length
    dl.verify()


@pytest.mark.parametrize(
    "positions",
    [[0], [0, 0, 0], [0, 1, 2], [0, 1, 1, 1]],
)
def test_insert_without_data(positions):
    dl = DList(INT_SIZE)
    for pos in positions:
        assert isinstance(dl.insert(pos), DListNode)
    assert len(dl) == len(positions)
    assert dl.size == INT_SIZE
    dl.verify()


@pytest.mark.parametrize("prefill, pos", [(0, 4), (2, 3), (2, 5)])
def test_insert_rejects_illegal_position(prefill, pos):
    dl = DList(INT_SIZE)
    for _ in range(prefill):
        dl.insert(0)
    with pytest.raises(IndexError):
        dl.insert(pos)
    assert len(dl) == prefill


@pytest.mark.parametrize(
    "inserts, items",
    [
        ([(0, 1)], [1]),
        ([(0, 3), (0, 2), (0, 1)], [1, 2, 3]),
        ([(0, 1), (1, 2), (2, 3)], [1, 2, 3]),
        ([(0, 1), (1, 4), (1, 3), (1, 2)], [1, 2, 3, 4]),
    ],
)
def test_insert_with_data(inserts, items):
    dl = DList(INT_SIZE)
    for pos, value in inserts:
        assert dl.insert(pos, value).data == value
    expect(dl, items)


def test_last_returns_last_element():
    dl = DList(INT_SIZE)
    assert dl.last() is None
    for value in (5, 9, 10):
        node = dl.append(value)
        assert node is dl.tail
        assert dl.last() == value


def test_prepend_links_both_ways():
    dl = DList(INT_SIZE)
    for count in range(1, 4):
        dl.prepend()
        assert len(dl) == count
        assert (dl.head is dl.tail) == (count == 1)
        forward, backward = dl.head, dl.tail
        for _ in range(count - 1):
            forward, backward = forward.next, backward.prev
        assert forward is dl.tail
        assert backward is dl.head
    dl.verify()


def test_prepend_sets_data_and_length():
    dl = DList(INT_SIZE)
    for count, value in enumerate((1, 2, 3), start=1):
        dl.prepend(value)
        assert len(dl) == count
    expect(dl, [3, 2, 1])


@pytest.mark.parametrize("pos", [0, 1, 2])
def test_remove_on_empty_list_does_not_work(pos):
    with pytest.raises(IndexError):
        DList(INT_SIZE).remove(pos)


def test_remove_from_front():
    dl = build(*DATA)
    for start in range(len(DATA)):
        assert dl.first() == DATA[start]
        dl.remove(0)
        expect(dl, DATA[start + 1:])
    assert dl.first() is None
    with pytest.raises(IndexError):
        dl.remove(0)


def test_remove_from_back():
    dl = build(*DATA)
    for length in range(len(DATA), 0, -1):
        assert dl.last() == DATA[length - 1]
        with pytest.raises(IndexError):
            dl.remove(length)
        dl.remove(length - 1)
        expect(dl, DATA[:length - 1])
    assert dl.last() is None
    with pytest.raises(IndexError):
        dl.remove(0)


def test_remove_from_middle():
    dl = build(*DATA)
    for pos, kept in [(2, [0, 1, 3]), (1, [0, 3]), (0, [3])]:
        dl.remove(pos)
        expect(dl, [DATA[k] for k in kept])


@pytest.mark.parametrize("a,b", [(0, 1), (1, 0), (4, 2), (2, 4), (0, 0)])
def test_swap_does_not_work_on_empty_list(a, b):
    with pytest.raises(IndexError):
        DList(INT_SIZE).swap(a, b)


@pytest.mark.parametrize(
    "count,bad_swaps",
    [(1, [(0, 1), (2, 0)]), (2, [(1, 2), (2, 0)]), (3, [(1, 3), (5, 0)])],
)
def test_swap_does_not_work_on_nonexisting_indices(count, bad_swaps):
    dl = build(*range(count))
    for a, b in bad_swaps:
        with pytest.raises(IndexError):
            dl.swap(a, b)
        expect(dl, range(count))


@pytest.mark.parametrize("items", [(1, 2), (1, 2, 3)])
def test_swap_does_nothing_when_indices_are_equal(items):
    dl = build(*items)
    for i in range(len(items)):
        dl.swap(i, i)
        expect(dl, items)


@pytest.mark.parametrize(
    "start, moves",
    [
        ((1, 2), [(None, 1, 0, [2, 1]), (None, 0, 1, [1, 2])]),
        (
            (1, 2, 3),
            [
                (None, 0, 1, [2, 1, 3]),
                (None, 2, 1, [2, 3, 1]),
                (None, 0, 2, [1, 3, 2]),
                (4, 1, 2, [1, 2, 3, 4]),
                (4, 1, 3, [1, 4, 3, 2, 4]),
            ],
        ),
    ],
)
def test_swap_works_correctly_with_different_indices(start, moves):
    dl = build(*start)
    for extra, a, b, items in moves:
        if extra is not None:
            dl.append(extra)
        dl.swap(a, b)
        expect(dl, items)


def test_get_and_set_out_of_range():
    dl = build(1)
    with pytest.raises(IndexError):
        dl.get(1)
    with pytest.raises(IndexError):
        dl.set(1, 7)
    assert dl.set(0, 7).data == 7
    expect(dl, [7])


def test_pop_returns_first_and_empties():
    dl = build(5, 6)
    for value, rest in [(5, [6]), (6, [])]:
        assert dl.pop() == value
        expect(dl, rest)
    assert (dl.head, dl.tail) == (None, None)
    with pytest.raises(IndexError):
        dl.pop()


@pytest.mark.parametrize(
    "items, pos, kept, moved",
    [((1, 2, 3, 4), 2, [1, 2], [3, 4]), ((1, 2, 3), 0, [], [1, 2, 3])],
)
def test_split(items, pos, kept, moved):
    dl = build(*items)
    tail_part = dl.split(pos)
    expect(dl, kept)
    expect(tail_part, moved)
    assert tail_part.size == dl.size
    with pytest.raises(IndexError):
        tail_part.split(len(moved))


@pytest.mark.parametrize(
    "left, right",
    [((1, 2), (3, 4)), ((), (1, 2)), ((1, 2), ())],
)
def test_join_moves_elements(left, right):
    dest, src = build(*left), build(*right)
    assert dest.join(src) is dest
    expect(dest, left + right)
    expect(src, [])


@pytest.mark.parametrize("dest_size, src_size", [(4, 6), (6, 4)])
def test_join_rejects_different_sizes(dest_size, src_size):
    with pytest.raises(ValueError):
        DList(dest_size).join(DList(src_size))


def test_copy_is_independent():
    dl = build(8, 8, 9)
    duplicate = dl.copy()
    assert duplicate.size == dl.size
    expect(duplicate, [8, 8, 9])
    duplicate.set(0, 1)
    expect(dl, [8, 8, 9])


@pytest.mark.parametrize("items", [(1, 2, 3, 4), (1,), ()])
def test_reverse(items):
    dl = build(*items)
    dl.reverse()
    expect(dl, items[::-1])
    if items:
        assert (dl.first(), dl.last()) == (items[-1], items[0])


def _break_back_link(dl):
    dl.tail.prev = dl.head.next.next


def _make_cycle(dl):
    dl.tail.next = dl.head


@pytest.mark.parametrize("damage", [_break_back_link, _make_cycle])
def test_verify_detects_damage(damage):
    dl = build(1, 2, 3)
    damage(dl)
    with pytest.raises(ListIntegrityError):
        dl.verify()
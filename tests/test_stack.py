from gopractice.stack import Stack


def test_push_pop():
    c = Stack()
    c.push(5)
    assert c.pop() == 5


def test_pop_order_is_lifo():
    s = Stack()
    for k in (1, 2, 3):
        s.push(k)
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]


def test_pop_empty_returns_zero():
    s = Stack()
    assert s.pop() == 0
    assert len(s) == 0


def test_str_lists_index_and_value():
    s = Stack()
    s.push(25)
    s.push(14)
    assert str(s) == "[0:25][1:14]"


def test_str_empty():
    assert str(Stack()) == ""


def test_push_beyond_capacity_is_ignored():
    s = Stack()
    for k in range(20):
        s.push(k)
    assert len(s) == Stack.capacity
    assert s.pop() == Stack.capacity - 1


def test_len_tracks_push_and_pop():
    s = Stack()
    s.push(7)
    s.push(8)
    assert len(s) == 2
    s.pop()
    assert len(s) == 1
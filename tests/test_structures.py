import pytest

from intopost.structures import Node, Queue, Stack


def test_node_links_forward():
    tail = Node("B")
    head = Node("A", tail)
    assert head.data == "A"
    assert head.next is tail
    assert tail.next is None


def test_stack_is_lifo():
    s = Stack()
    assert s.empty()
    for ch in "ABC":
        s.push(ch)
    assert len(s) == 3
    assert s.top() == "C"
    assert [s.pop(), s.pop(), s.pop()] == ["C", "B", "A"]
    assert s.empty()
    assert len(s) == 0


def test_stack_top_does_not_remove():
    s = Stack()
    s.push(1)
    assert s.top() == 1
    assert s.top() == 1
    assert len(s) == 1


@pytest.mark.parametrize("op", ["pop", "top"])
def test_stack_empty_access_is_contract_violation(op):
    s = Stack()
    with pytest.raises(AssertionError, match="Stack is empty"):
        getattr(s, op)()


def test_stack_reusable_after_draining():
    s = Stack()
    s.push("x")
    s.pop()
    s.push("y")
    assert s.top() == "y"


def test_queue_is_fifo():
    q = Queue()
    assert q.empty()
    for ch in "ABC":
        q.enqueue(ch)
    assert len(q) == 3
    assert q.front() == "A"
    assert q.back() == "C"
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == ["A", "B", "C"]
    assert q.empty()


def test_queue_single_element_is_front_and_back():
    q = Queue()
    q.enqueue(42)
    assert q.front() == 42
    assert q.back() == 42


def test_queue_clears_back_when_emptied():
    q = Queue()
    q.enqueue("A")
    q.dequeue()
    with pytest.raises(AssertionError):
        q.back()
    # Enqueue after draining must relink from scratch
    q.enqueue("B")
    assert q.front() == "B"
    assert q.back() == "B"


@pytest.mark.parametrize("op", ["dequeue", "front", "back"])
def test_queue_empty_access_is_contract_violation(op):
    q = Queue()
    with pytest.raises(AssertionError, match="Queue is empty"):
        getattr(q, op)()


def test_queue_iteration_does_not_consume():
    q = Queue()
    for ch in "XYZ":
        q.enqueue(ch)
    assert list(q) == ["X", "Y", "Z"]
    assert len(q) == 3
    assert q.front() == "X"

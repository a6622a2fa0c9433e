from chainlist.node import Node


def test_single_node_iterates_its_value():
    assert list(Node(7)) == [7]


def test_chain_iterates_in_link_order():
    chain = Node(1, Node(2, Node(3)))
    assert list(chain) == [1, 2, 3]


def test_iteration_starts_at_the_node_it_is_called_on():
    tail = Node(3)
    chain = Node(1, Node(2, tail))
    assert list(chain.next) == [2, 3]
    assert list(tail) == [3]


def test_new_node_has_no_successor():
    node = Node(5)
    assert node.next is None
    assert node.data == 5


def test_relinking_a_node_changes_what_it_iterates():
    first = Node(1)
    second = Node(2)
    first.next = second
    assert first.next is second
    assert list(first) == [1, 2]
    second.next = Node(3)
    assert list(first) == [1, 2, 3]
    first.next = None
    assert list(first) == [1]
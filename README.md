# chainlist

A small singly linked list of integers with the classic operations. You can push and pop at either end, insert at a position, and search iteratively or recursively. The list can be reversed in place, and you can remove the n-th node from the end. It detects cycles and removes them. There is also a merge sort over a chain of nodes.

## Installing

```
pip install .
```

## Nodes

`chainlist.node.Node` is a dataclass with `data` and `next` fields. Nodes compare by identity. Iterating over a node yields the values from that node to the end of its chain:

```python
from chainlist.node import Node

chain = Node(1, Node(2, Node(3)))
list(chain)               # [1, 2, 3]
```

## Using the list

```python
from chainlist.linked import LinkedList

ll = LinkedList([1, 2, 3, 4])
ll.push_front(0)
ll.push_back(5)
print(ll)                 # 0 -> 1 -> 2 -> 3 -> 4 -> 5 -> NULL
print(len(ll))            # 6

ll.insert(100, 2)         # 100 ends up at index 2
ll.search(3)              # index of the first 3, or -1
ll.search_recursive(3)    # same result, found recursively

ll.reverse()
ll.remove_nth_from_end(2) # 1 is the tail; returns the removed value
list(ll)                  # plain Python list of the values

ll.pop_front()            # returns the removed value
ll.pop_back()             # returns the removed value
```

`head` and `tail` are public attributes, so you can splice nodes by hand. For example, you can link the tail back into the list:

```python
ll = LinkedList([1, 2, 3, 4])
ll.tail.next = ll.head
ll.has_cycle()            # True
ll.remove_cycle()         # True: the loop was broken, tail is updated
print(ll)                 # 1 -> 2 -> 3 -> 4 -> NULL
```

`remove_cycle` returns `False` when there is no cycle.

Some operations cannot be carried out, and these raise `IndexError`:

- popping from an empty list;
- inserting at a negative position or past the end;
- removing the n-th node from the end with `n` outside `1..len(list)`.

## Sorting a chain of nodes

`chainlist.sorting` works directly on `Node` chains:

- `split_at_mid(head)` cuts a chain at its middle and returns the head of the right half. The left half keeps `head`.
- `merge(left, right)` merges two sorted chains. On equal values, those from `left` come first.
- `merge_sort(head)` sorts a chain and returns its new head.

```python
from chainlist.node import Node
from chainlist.sorting import merge_sort

head = merge_sort(Node(3, Node(1, Node(2))))
list(head)                # [1, 2, 3]
```

## Demo

```
chainlist-demo
chainlist-demo --demo deque
chainlist-demo --demo linked
```

The demo prints each step as it goes.

- `deque` builds a `collections.deque`, prints its size, front and back, then pops from both ends.
- `linked` builds a `LinkedList` with `push_front` and `push_back`.
- `all` runs both and is the default.

`format_values` in `chainlist.demo` renders any iterable of values as `a -> b -> NULL`.

## Running the tests

```
pip install .[test]
pytest
```
"""Singly linked list with node handles."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list holding one element."""

    data: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list that hands out nodes as positions."""

    def __init__(self):
        self._head = None

    def __repr__(self):
        return f"LinkedList({list(self)!r})"

    def _nodes(self):
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def __iter__(self):
        for node in self._nodes():
            yield node.data

    def clear(self):
        """Remove all elements."""
        self._head = None

    def empty(self):
        """Return whether the list holds no elements."""
        return self._head is None

    def erase(self, element):
        """Remove every element equal to ``element``."""
        self.erase_if(lambda data: data == element)

    def erase_if(self, predicate):
        """Remove every element for which ``predicate`` returns true."""
        previous = None
        node = self._head
        while node is not None:
            following = node.next
            if predicate(node.data):
                if previous is None:
                    self._head = following
                else:
                    previous.next = following
                node.next = None
            else:
                previous = node
            node = following

    def erase_node(self, node):
        """Remove ``node`` from the list and return the node that followed it."""
        previous = None
        for current in self._nodes():
            if current is node:
                following = node.next
                if previous is None:
                    self._head = following
                else:
                    previous.next = following
                node.next = None
                return following
            previous = current
        raise ValueError("node does not belong to this list")

    def find(self, element):
        """Return the first node whose element equals ``element``, or None."""
        return self.find_if(lambda data: data == element)

    def find_if(self, predicate):
        """Return the first node for which ``predicate`` holds, or None."""
        return next((node for node in self._nodes() if predicate(node.data)), None)

    def front(self):
        """Return the first node, or None when the list is empty."""
        return self._head

    def insert(self, previous, element):
        """Insert ``element`` after ``previous``, or at the head when it is None."""
        if previous is None:
            return self.push_front(element)
        node = ListNode(element, previous.next)
        previous.next = node
        return node

    def push_back(self, element):
        """Append ``element`` at the end and return its node."""
        node = ListNode(element)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        return node

    def push_front(self, element):
        """Prepend ``element`` at the head and return its node."""
        node = ListNode(element, self._head)
        self._head = node
        return node
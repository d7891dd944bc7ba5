"""Example: a hand-rolled test script driven by an AssertionTracker.

Run with:
    python examples/tally_example_basic.py

Show passing assertions too, with Unicode markers:
    TALLY_VERBOSE=1 TALLY_FANCY=1 python examples/tally_example_basic.py
"""

import tally


class Stack:
    def __init__(self):
        self._items = []

    def push(self, item):
        self._items.append(item)

    def pop(self):
        return self._items.pop() if self._items else None

    def peek(self):
        return self._items[-1] if self._items else None

    def __len__(self):
        return len(self._items)


tracker = tally.AssertionTracker.from_config(tally.load_config())


def test_empty_stack():
    stack = Stack()
    tracker.assert_true(len(stack) == 0, "new stack should be empty")
    tracker.assert_null(stack.pop())
    tracker.assert_null(stack.peek())


def test_push_pop():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    tracker.assert_equals_number(len(stack), 2)
    tracker.assert_equals_string(stack.pop(), "b")
    tracker.assert_equals_value(stack.peek(), "a")


def test_deliberate_failure():
    stack = Stack()
    stack.push(1)
    # Fails on purpose, the run keeps going.
    tracker.assert_equals_number(stack.pop(), 2)
    tracker.assert_false(len(stack) > 0, "stack should be empty after pop")


def main():
    tracker.reinitialize()
    test_empty_stack()
    test_push_pop()
    test_deliberate_failure()

    # Explicitly named block instead of the calling function's name.
    with tracker.test("peek is non-destructive"):
        stack = Stack()
        stack.push(42)
        stack.peek()
        tracker.assert_equals_number(len(stack), 1)

    tracker.print_summary()


if __name__ == "__main__":
    main()

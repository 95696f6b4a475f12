"""Readable dumps of a stack for inspection."""

from __future__ import annotations

from pushswap.stack import Stack

_EMPTY = "Stack is empty\n"


def format_stack(stack: Stack) -> str:
    """One value per line from the top, then a rule and the stack's name."""
    if len(stack) == 0:
        return _EMPTY
    values = "".join(f"{value}\n" for value in stack)
    return f"{values}-----\n  {stack.name}  \n"


def describe_stack(stack: Stack) -> str:
    """A block per value giving its position, median side and neighbours."""
    if len(stack) == 0:
        return _EMPTY
    values = list(stack)
    previous = ["-"] + [str(value) for value in values[:-1]]
    following = [str(value) for value in values[1:]] + ["-"]
    blocks = [
        "-------\n"
        f"Num: {value}\n"
        f"Name: {stack.name}\n"
        f"Index: {index}\n"
        f"Above median: {int(stack.above_median(index))}\n"
        f"Prev: {prev}\n"
        f"Next: {nxt}\n"
        "-------\n"
        for index, (value, prev, nxt) in enumerate(zip(values, previous, following))
    ]
    return "".join(blocks)
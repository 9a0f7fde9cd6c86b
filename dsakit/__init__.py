"""Classic algorithms and data structures: number routines, sorting, stacks, queues, linked lists and binary search trees."""

__version__ = "0.1.0"

__all__ = ["bst", "linkedlist", "numbers", "queues", "sorting", "stacks"]
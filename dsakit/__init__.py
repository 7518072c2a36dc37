"""Classic data-structure and algorithm routines: matrices, arrays, linked lists, stacks, queues, sets, strings and melody scoring."""

__version__ = "0.1.0"
"""TCP message server and client, node classes, and the linked list, queue, tree and dictionary beneath them."""

__version__ = "1.0.0"
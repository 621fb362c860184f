"""Order allocation service: assigns order items to distribution centers and stores the orders."""

__version__ = "0.1.0"
"""A two-player terminal snake game built on a position stack and command queues."""

__version__ = "0.1.0"
"""Classic algorithms, data structures, a worker pool, a time-zone tool and a layered request handler."""

__version__ = "0.1.0"
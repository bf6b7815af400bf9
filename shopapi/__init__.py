"""Online shop REST API for managing products stored in MySQL."""

__version__ = "1.0.0"
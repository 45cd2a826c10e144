"""Parts catalogue admin: option loading and pagination"""

__version__ = "1.0.0"

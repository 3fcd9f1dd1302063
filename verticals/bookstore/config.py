"""Bookstore vertical configuration.

Loads the BookstoreConfig from the environment once at import time,
demonstrating how verticals use the domain config pattern.
"""

from patterns.domain_config import BookstoreConfig

config = BookstoreConfig.from_env()

"""
Study notes on Django's ORM, with the tooling that keeps them honest.
"""
__version__ = "0.3.0"

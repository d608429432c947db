"""
Test configuration package.

Holds the pytest marker registration imported by conftest.py.
"""

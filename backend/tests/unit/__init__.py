"""
Unit tests package.

Contains isolated unit tests for domain rules, validators, services and
configuration helpers.
"""

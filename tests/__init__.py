"""Test suite for the customer service.

- unit/: Unit tests with mocked or in-memory dependencies
"""

"""Shared test fixtures package.

Provides table data and expected-output helpers for all test suites.
"""

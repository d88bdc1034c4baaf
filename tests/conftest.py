"""Test configuration and fixtures for the Book Management API."""

from tests.fixtures import *  # noqa: F401,F403

"""Test configuration and fixtures."""

import os

import logfire

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)

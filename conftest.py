"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Isolation of node styling defaults from the developer's environment
"""

from __future__ import annotations

import pytest
from dotenv import load_dotenv

from boxlayout.config import EnvVar

# Load environment variables from .env file
load_dotenv()


@pytest.fixture(autouse=True)
def isolated_node_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear styling overrides so tests see the built-in node defaults.

    Tests that exercise environment overrides set the variables themselves.
    """
    for env_var in EnvVar:
        if env_var.value.category == "defaults":
            monkeypatch.delenv(env_var.value.name, raising=False)

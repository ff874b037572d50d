"""
Root-level pytest configuration for ProspectResearch.

Keeps the project root importable (config, models, services, ...) and
registers custom markers.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (require network access)"
    )

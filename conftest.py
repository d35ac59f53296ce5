"""
Root conftest.py for the techchallenge users project.

Puts each service directory on sys.path so its tests can import the
service's ``app`` package.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """Add service directories to sys.path before collection."""
    root_dir = Path(__file__).parent

    for service_path in sorted((root_dir / "services").iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))

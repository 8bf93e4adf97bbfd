"""Integration test conftest: real SQL on an in-memory SQLite database.

Inherits the root conftest.py fixtures (db_session, test_user, etc.)
and adds integration-specific markers.
"""

import pytest


@pytest.fixture(autouse=True)
def _mark_integration(request):
    """Auto-mark all tests in this directory as integration."""
    request.node.add_marker(pytest.mark.integration)

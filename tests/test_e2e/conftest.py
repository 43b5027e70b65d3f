"""Pytest configuration for end-to-end tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_event_recorder():
    """Reset the event recorder between tests to avoid state pollution."""
    from wargame.services.event_recorder import event_recorder

    event_recorder.clear()
    yield
    event_recorder.clear()

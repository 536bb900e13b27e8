"""Shared fixtures for shipping tests."""

import pytest

from shipping.tests.helpers import RecordingNotifier, make_order


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def medium_order():
    """15 lb box, 12x12x12 in. Actual weight beats volumetric (12.43 lbs)."""
    return make_order(15.0, 12.0, 12.0, 12.0, "150.00")


@pytest.fixture
def bulky_order():
    """1 lb pillow in a 30 in cube. Volumetric weight (194.24 lbs) beats actual."""
    return make_order(1.0, 30.0, 30.0, 30.0, "50.00")

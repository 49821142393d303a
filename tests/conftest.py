"""Shared fixtures"""

import pytest

import minliblog
from minliblog import ContextConfig


@pytest.fixture
def default_context():
    """The process-wide context, reset before and after the test."""
    context = minliblog.reset_default_context()
    yield context
    minliblog.reset_default_context(ContextConfig.default())

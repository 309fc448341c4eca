"""Shared fixtures"""
import logging

import pytest

from netrange.config import NetRangeConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Give every test a fresh default configuration"""
    config = NetRangeConfig()
    set_config(config)
    yield config
    set_config(None)
    logging.getLogger("netrange").handlers.clear()

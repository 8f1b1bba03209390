import logging

import pytest

from reflectory.reflection import AccessPolicy, ReflectorCache


def pytest_configure(config):
    logging.getLogger("reflectory").setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def reflector_cache():
    # every test starts from an empty, enabled cache
    cache = ReflectorCache()
    cache.enabled = True
    cache.configure(AccessPolicy())
    yield cache
    cache.clear()

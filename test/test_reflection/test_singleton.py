import threading
from concurrent.futures import ThreadPoolExecutor

from reflectory.singleton import SingletonMeta


class Settings(metaclass=SingletonMeta):
    def __init__(self):
        self.values = {}


def test_same_instance_until_cleared():
    first = Settings()
    assert Settings() is first
    Settings.clear_instance()
    assert Settings() is not first
    Settings.clear_instance()


def test_concurrent_creation_yields_one_instance():
    Settings.clear_instance()
    thread_count = 8
    barrier = threading.Barrier(thread_count)

    def create(_):
        barrier.wait()
        return Settings()

    with ThreadPoolExecutor(max_workers=thread_count) as executor:
        instances = list(executor.map(create, range(thread_count)))
    assert all(instance is instances[0] for instance in instances)
    Settings.clear_instance()

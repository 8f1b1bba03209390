from __future__ import annotations

import threading

from typing_extensions import ClassVar, Dict, Type, Any


class SingletonMeta(type):
    """
    A metaclass for creating singleton classes.
    Creation of the instance is serialized, so threads racing to create it all receive the same object.
    """

    _instances: ClassVar[Dict[Type, Any]] = {}
    """
    The available instances of the singleton classes.
    """
    _creation_lock: ClassVar[threading.Lock] = threading.Lock()

    def __call__(cls, *args, **kwargs):
        """
        Intercept the initialization of every class using this metaclass to check if there is an instance registered
        already.
        """
        instance = cls._instances.get(cls)
        if instance is None:
            with cls._creation_lock:
                instance = cls._instances.get(cls)
                if instance is None:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
        return instance

    def clear_instance(cls):
        """
        Removes the single, stored instance of this class, allowing a new one
        to be created on the next call.
        """
        cls._instances.pop(cls, None)

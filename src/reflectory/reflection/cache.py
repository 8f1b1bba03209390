"""
Process wide cache of reflectors.

Reads never take a lock. A reflector is built completely before it is published, and publication goes through
:meth:`dict.setdefault`, so threads that race to describe the same class for the first time may build it more
than once, but all of them return the single reflector that got published.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field

from typing_extensions import Dict, Iterator, Type

from .policy import AccessPolicy
from .reflector import Reflector
from ..singleton import SingletonMeta

logger = logging.getLogger(__name__)


@dataclass
class ReflectorCache(metaclass=SingletonMeta):
    """Singleton map from classes to their reflectors."""

    enabled: bool = True
    """
    Whether reflectors are kept. When disabled, every request builds a fresh reflector and nothing is stored.
    """
    policy: AccessPolicy = field(default_factory=AccessPolicy)
    """
    The access policy used to build new reflectors.
    """
    _reflectors: Dict[Type, Reflector] = field(
        default_factory=dict, init=False, repr=False
    )

    def for_class(self, clazz: Type) -> Reflector:
        """
        :param clazz: The class to describe.
        :return: The reflector of the class.
        :raises AmbiguousAccessor: If the accessors of the class are ambiguous. Nothing is cached in that case.
        """
        if not isinstance(clazz, type):
            raise TypeError(f"Expected a class, got {clazz!r}")
        if not self.enabled:
            return Reflector(clazz, policy=self.policy)
        cached = self._reflectors.get(clazz)
        if cached is None:
            built = Reflector(clazz, policy=self.policy)
            cached = self._reflectors.setdefault(clazz, built)
            if cached is built:
                logger.debug(f"Cached reflector for {clazz.__qualname__}")
        return cached

    def is_cached(self, clazz: Type) -> bool:
        return clazz in self._reflectors

    def configure(self, policy: AccessPolicy) -> None:
        """
        Replace the access policy. Reflectors built under the previous policy are dropped.
        """
        self.policy = policy
        self.clear()

    def clear(self) -> None:
        self._reflectors.clear()

    @contextmanager
    def disabled(self) -> Iterator[ReflectorCache]:
        """
        Bypass the cache within the block, restoring the previous setting afterwards.
        """
        previous = self.enabled
        self.enabled = False
        try:
            yield self
        finally:
            self.enabled = previous


def describe(clazz: Type) -> Reflector:
    """
    Get the reflector of a class, building and caching it on first use.

    :param clazz: The class to describe.
    :return: The reflector of the class.
    """
    return ReflectorCache().for_class(clazz)


def set_class_cache_enabled(enabled: bool) -> None:
    ReflectorCache().enabled = enabled
    logger.debug(f"Reflector cache {'enabled' if enabled else 'disabled'}")


def is_class_cache_enabled() -> bool:
    return ReflectorCache().enabled

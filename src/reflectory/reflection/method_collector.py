from __future__ import annotations

import logging
from dataclasses import dataclass, field

from typing_extensions import Dict, List, Type

from .policy import AccessPolicy
from .wrapped_method import WrappedMethod
from ..utils import class_chain, interfaces_of, is_framework_class

logger = logging.getLogger(__name__)


@dataclass
class UniqueMethodCollector:
    """
    Collects one method per signature from a class, its primary base chain and every interface of the classes
    in that chain.

    The walk goes from the most derived class upwards, so a method recorded for a signature shadows the
    declarations of that signature further up. Methods that only differ in their return type have different
    signatures and are both collected; choosing between them is left to the accessor resolution.
    Synthetic forwarding methods are never collected.
    """

    policy: AccessPolicy = field(default_factory=AccessPolicy)

    def collect(self, clazz: Type) -> List[WrappedMethod]:
        """
        :param clazz: The class to collect the methods of.
        :return: The unique methods in discovery order.
        """
        unique_methods: Dict[str, WrappedMethod] = {}
        visited = set()
        for current in class_chain(clazz):
            for owner in [current, *interfaces_of(current)]:
                if owner in visited or is_framework_class(owner):
                    continue
                visited.add(owner)
                self._add_unique_methods(unique_methods, owner)
        return list(unique_methods.values())

    def _add_unique_methods(
        self, unique_methods: Dict[str, WrappedMethod], owner: Type
    ) -> None:
        for name, member in vars(owner).items():
            method = WrappedMethod.from_member(owner, name, member)
            if method is None or method.is_synthetic:
                continue
            if method.signature in unique_methods:
                continue
            if not self.policy.can_access(name):
                logger.debug(f"Skipping inaccessible method {method}")
                continue
            unique_methods[method.signature] = method

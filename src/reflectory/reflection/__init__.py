from .cache import (
    ReflectorCache,
    describe,
    set_class_cache_enabled,
    is_class_cache_enabled,
)
from .failures import (
    ReflectionError,
    AmbiguousAccessor,
    NoSuchAccessor,
    AccessError,
    NoDefaultConstructor,
)
from .invoker import Invoker, MethodInvoker, GetFieldInvoker, SetFieldInvoker
from .policy import AccessPolicy
from .reflector import Reflector
from ..utils import synthetic

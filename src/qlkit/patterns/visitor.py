"""
Acyclic visitor dispatch.

Visitable classes (events, cashflows) never know about concrete
visitors. A visitor declares one ``visit_<snake_case_class_name>`` method
per type it handles; the most specific handler along the visited object's
MRO wins, so a visitor handling ``visit_coupon`` also receives fixed-rate
coupons unless it defines ``visit_fixed_rate_coupon``.
"""

import re
from functools import lru_cache
from typing import Any

from ..errors import UnsupportedVisitorError

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


@lru_cache(maxsize=None)
def visit_method_name(cls: type) -> str:
    """
    Handler name for a class.

    >>> visit_method_name(FixedRateCoupon)
    'visit_fixed_rate_coupon'
    """
    return "visit_" + _CAMEL_BOUNDARY.sub("_", cls.__name__).lower()


class AcyclicVisitor:
    """Base class for visitors dispatching on the visited object's type."""

    def visit(self, visitable: Any) -> Any:
        for cls in type(visitable).__mro__:
            handler = getattr(self, visit_method_name(cls), None)
            if handler is not None:
                return handler(visitable)
        raise UnsupportedVisitorError(
            f"{type(self).__name__} is not a {type(visitable).__name__} visitor"
        )


__all__ = [
    "AcyclicVisitor",
    "visit_method_name",
]

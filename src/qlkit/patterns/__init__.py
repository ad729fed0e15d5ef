"""
Design patterns package - lazy recalculation and dispatch plumbing.

Provides:
- Observable / Observer: change notification fabric
- LazyObject: cached calculation invalidated by its inputs
- AcyclicVisitor: type-based dispatch for events and cashflows
"""

from .observable import Observable, Observer, ObservableValue
from .lazy_object import LazyObject
from .visitor import AcyclicVisitor, visit_method_name

__all__ = [
    "Observable",
    "Observer",
    "ObservableValue",
    "LazyObject",
    "AcyclicVisitor",
    "visit_method_name",
]

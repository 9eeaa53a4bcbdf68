"""Transitions package — public API re-exports."""

from .descriptors import SymbolRef, ref, Translation, Rotation, Scaling, Transition
from .internal import (
    InternalTranslation,
    InternalRotation,
    InternalScaling,
    InternalTransform,
    create_internal_transform,
    create_internal_transforms,
)
from .engine import compute_transition, compute_transitions
from .applier import perform_transformation, perform_transformations

__all__ = [
    "SymbolRef",
    "ref",
    "Translation",
    "Rotation",
    "Scaling",
    "Transition",
    "InternalTranslation",
    "InternalRotation",
    "InternalScaling",
    "InternalTransform",
    "create_internal_transform",
    "create_internal_transforms",
    "compute_transition",
    "compute_transitions",
    "perform_transformation",
    "perform_transformations",
]

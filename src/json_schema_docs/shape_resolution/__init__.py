"""Reference resolution and shape merging exports."""

from .reference_activation import ReferenceActivationSet
from .shape_resolver import (
    ObjectShape,
    ShapeResolver,
    merge_keywords,
    merge_properties,
    merge_required,
)

__all__ = [
    "ObjectShape",
    "ReferenceActivationSet",
    "ShapeResolver",
    "merge_keywords",
    "merge_properties",
    "merge_required",
]

"""BIOS attribute descriptors and key decoding."""

from gru.bios.attributes import (
    DEFAULT_GENERATION,
    AttributeChoice,
    AttributeDescriptor,
    AttributeLibrary,
    parse_descriptor,
)

__all__ = [
    "DEFAULT_GENERATION",
    "AttributeChoice",
    "AttributeDescriptor",
    "AttributeLibrary",
    "parse_descriptor",
]

"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_config,
    make_dictionary,
    make_translation_data,
)

__all__ = [
    "make_config",
    "make_dictionary",
    "make_translation_data",
]

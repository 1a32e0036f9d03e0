#!/usr/bin/env python3
"""
Passphrase Errors
=================
Exception hierarchy raised by the grammar engine.

All engine failures are fatal for the call that raised them; nothing here is
retried or recovered internally.
"""


class PassphraseError(Exception):
    """Base class for all passphrasekit errors."""


class StructureError(PassphraseError, ValueError):
    """A phrase description cannot be linked into (subject, verb, object) groups."""


class DictionaryExhaustedError(PassphraseError, LookupError):
    """No word in the dictionary satisfies a template's constraints."""

    def __init__(self, category: str, message: str = None):
        self.category = category
        super().__init__(message or f"No eligible {category} left in the dictionary")


class UninitializedDictionaryError(PassphraseError, RuntimeError):
    """Generation was attempted before a non-empty dictionary was loaded."""

    def __init__(self, message: str = None):
        super().__init__(message or "You must load a dictionary before generating a passphrase")


class DictionaryLoadError(PassphraseError):
    """A dictionary source could not be read or parsed."""


class PhraseDescriptionParseError(PassphraseError, ValueError):
    """A textual phrase description is malformed."""


__all__ = [
    "PassphraseError",
    "StructureError",
    "DictionaryExhaustedError",
    "UninitializedDictionaryError",
    "DictionaryLoadError",
    "PhraseDescriptionParseError",
]

#!/usr/bin/env python3
"""
passphrasekit - Readable Passphrase Generator
=============================================

Generates grammatically correct, memorable passphrases such as
"the sleepy walrus has quietly polished an orange kettle" and reports how
many combinations (bits of entropy) a phrase shape can produce.

Quick Start
-----------
    from passphrasekit import ReadablePassphraseGenerator, PhraseStrength

    gen = ReadablePassphraseGenerator()
    gen.load_dictionary()

    phrase = gen.generate(PhraseStrength.STRONG)
    bits = gen.calculate_combinations(PhraseStrength.STRONG).optional_average_as_entropy_bits

    # Keep the phrase out of plain strings
    with gen.generate_as_secure() as secure:
        with secure.reveal() as plaintext:
            use(plaintext)

Modules
-------
    passphrasekit.words         - Word model (nouns, verbs, ...)
    passphrasekit.dictionary    - Immutable word dictionary
    passphrasekit.dictionaries  - YAML dictionary loader and bundled words
    passphrasekit.phrase        - Clauses, linking, templates, expansion, resolution
    passphrasekit.combinations  - Combination counts and entropy
    passphrasekit.randomness    - Crypto and fast random sources
    passphrasekit.sinks         - Plain, UTF-8 and masked output buffers

CLI Usage
---------
    python -m passphrasekit generate -n 5 -s strong
    python -m passphrasekit combinations
"""

__version__ = "0.4.0"
__author__ = "passphrasekit"

from .combinations import PhraseCombinations, UNKNOWN_ENTROPY_BITS, count_combinations, entropy_bits
from .dictionaries import DictionaryLoader, YamlDictionaryLoader, load_default_dictionary
from .dictionary import EmptyDictionary, WordDictionary
from .errors import (
    DictionaryExhaustedError,
    DictionaryLoadError,
    PassphraseError,
    PhraseDescriptionParseError,
    StructureError,
    UninitializedDictionaryError,
)
from .generator import ReadablePassphraseGenerator
from .phrase import (
    ConjunctionClause,
    NounClause,
    PhraseStrength,
    VerbClause,
    format_phrase_description,
    parse_phrase_description,
)
from .randomness import CryptoRandomSource, FastRandomSource, RandomSource, get_random_source
from .sinks import OutputSink, SecurePhrase, SecureSink, TextSink, Utf8Sink
from .words import Adjective, Adverb, Article, Conjunction, Noun, Preposition, Pronoun, Verb, VerbTense

__all__ = [
    '__version__',
    # Generator
    'ReadablePassphraseGenerator',
    'PhraseStrength',
    # Clauses
    'NounClause',
    'VerbClause',
    'ConjunctionClause',
    'parse_phrase_description',
    'format_phrase_description',
    # Words and dictionaries
    'Noun',
    'Verb',
    'VerbTense',
    'Adjective',
    'Adverb',
    'Article',
    'Preposition',
    'Conjunction',
    'Pronoun',
    'WordDictionary',
    'EmptyDictionary',
    'DictionaryLoader',
    'YamlDictionaryLoader',
    'load_default_dictionary',
    # Combinations
    'PhraseCombinations',
    'UNKNOWN_ENTROPY_BITS',
    'count_combinations',
    'entropy_bits',
    # Randomness
    'RandomSource',
    'CryptoRandomSource',
    'FastRandomSource',
    'get_random_source',
    # Sinks
    'OutputSink',
    'TextSink',
    'Utf8Sink',
    'SecureSink',
    'SecurePhrase',
    # Errors
    'PassphraseError',
    'StructureError',
    'DictionaryExhaustedError',
    'UninitializedDictionaryError',
    'DictionaryLoadError',
    'PhraseDescriptionParseError',
]

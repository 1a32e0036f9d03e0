#!/usr/bin/env python3
"""
Passphrase Generator
====================
The generator session: owns the dictionary and random sources and runs the
clause -> template -> word pipeline.

Usage:
    from passphrasekit import ReadablePassphraseGenerator, PhraseStrength

    gen = ReadablePassphraseGenerator()
    gen.load_dictionary()
    phrase = gen.generate(PhraseStrength.STRONG)

    combinations = gen.calculate_combinations(PhraseStrength.STRONG)
    print(combinations.optional_average_as_entropy_bits)

A generation call is synchronous and keeps all of its mutable state local,
so one generator can serve several threads when its random source is the
(thread-safe) crypto profile.
"""

import logging
from typing import Mapping, Optional, Sequence, Tuple, Union

from .combinations import PhraseCombinations, combine_strengths, count_combinations, entropy_bits
from .dictionaries import DictionaryLoader, YamlDictionaryLoader, parse_argument_string
from .dictionary import EmptyDictionary, WordDictionary
from .errors import UninitializedDictionaryError
from .phrase.clauses import Clause
from .phrase.expansion import expand
from .phrase.resolution import resolve, write_words
from .phrase.strength import (
    PhraseStrength,
    concrete_strengths,
    create_phrase_description,
    create_random_phrase_description,
)
from .randomness import CryptoRandomSource, RandomSource
from .sinks import OutputSink, SecurePhrase, SecureSink, TextSink, Utf8Sink

logger = logging.getLogger(__name__)

PhraseInput = Union[PhraseStrength, Sequence[Clause]]


class ReadablePassphraseGenerator:
    """
    Generates grammatical, memorable passphrases.

    Parameters
    ----------
    randomness : RandomSource, optional
        Source for every word and clause choice (default: CryptoRandomSource)
    preset_randomness : RandomSource, optional
        Source used to pick a preset under PhraseStrength.RANDOM
        (default: ``randomness``)
    """

    def __init__(self, randomness: RandomSource = None, preset_randomness: RandomSource = None):
        self.randomness = randomness or CryptoRandomSource()
        self.preset_randomness = preset_randomness or self.randomness
        self.dictionary: WordDictionary = EmptyDictionary()

    # =========================================================================
    # Dictionary
    # =========================================================================

    def load_dictionary(self,
                        loader: DictionaryLoader = None,
                        arguments: Union[str, Mapping[str, str], None] = None):
        """
        Load a dictionary with ``loader`` (default: bundled YAML dictionary).

        ``arguments`` may be a mapping or a string like
        ``"file=words.yaml; name=mine"``.
        """
        loader = loader or YamlDictionaryLoader()
        if isinstance(arguments, str):
            arguments = parse_argument_string(arguments)
        self.dictionary = loader.load(arguments or {})

    def try_load_dictionary(self,
                            loader: DictionaryLoader = None,
                            arguments: Union[str, Mapping[str, str], None] = None
                            ) -> Tuple[bool, Optional[Exception]]:
        """
        Load a dictionary, reporting failure instead of raising.

        On failure the generator is left with an empty dictionary rather
        than whatever was loaded before.
        """
        try:
            self.load_dictionary(loader, arguments)
        except Exception as e:
            logger.warning("Dictionary load failed: %s", e)
            self.dictionary = EmptyDictionary()
            return False, e
        return True, None

    def set_dictionary(self, dictionary: WordDictionary):
        if dictionary is None:
            raise ValueError("dictionary is required")
        self.dictionary = dictionary

    # =========================================================================
    # Combinations
    # =========================================================================

    def calculate_combinations(self, phrase: PhraseInput = PhraseStrength.RANDOM) -> PhraseCombinations:
        """
        Number of distinct phrases for a strength or clause list.

        RANDOM aggregates over every concrete preset: shortest is the minimum,
        longest the sum and the average is the mean of per-preset entropy.
        """
        if isinstance(phrase, PhraseStrength):
            if phrase == PhraseStrength.RANDOM:
                return combine_strengths([
                    count_combinations(create_phrase_description(s), self.dictionary)
                    for s in concrete_strengths()
                ])
            return count_combinations(create_phrase_description(phrase), self.dictionary)
        return count_combinations(phrase, self.dictionary)

    @staticmethod
    def calculate_entropy_bits(combinations: float) -> float:
        return entropy_bits(combinations)

    # =========================================================================
    # Generation
    # =========================================================================

    def generate(self, phrase: PhraseInput = PhraseStrength.RANDOM, include_spaces: bool = True) -> str:
        """Generate a phrase as a plain string (fastest, least protected)."""
        return self.generate_into(TextSink(), phrase, include_spaces)

    def generate_as_secure(self, phrase: PhraseInput = PhraseStrength.RANDOM,
                           include_spaces: bool = True) -> SecurePhrase:
        """Generate a phrase into a masked buffer that never holds a plain string."""
        return self.generate_into(SecureSink(), phrase, include_spaces)

    def generate_as_utf8_bytes(self, phrase: PhraseInput = PhraseStrength.RANDOM,
                               include_spaces: bool = True) -> bytearray:
        """Generate a phrase as UTF-8 bytes the caller can zero after use."""
        return self.generate_into(Utf8Sink(), phrase, include_spaces)

    def generate_into(self, sink: OutputSink, phrase: PhraseInput = PhraseStrength.RANDOM,
                      include_spaces: bool = True):
        """
        Generate a phrase into ``sink`` and return ``sink.finalize()``.

        If anything fails the sink is wiped before the error propagates, so
        no partial phrase is left behind.

        Raises
        ------
        UninitializedDictionaryError
            If no dictionary is loaded (checked before any randomness is used)
        StructureError
            If the phrase description cannot be linked
        DictionaryExhaustedError
            If the dictionary runs out of eligible words
        """
        if phrase is None:
            raise ValueError("phrase is required")
        if self.dictionary is None or self.dictionary.is_empty:
            raise UninitializedDictionaryError()

        clauses = self._phrase_description(phrase)
        try:
            templates = expand(clauses, self.randomness)
            write_words(resolve(templates, self.dictionary, self.randomness), sink, include_spaces)
            return sink.finalize()
        except Exception:
            sink.wipe()
            raise

    def _phrase_description(self, phrase: PhraseInput) -> Sequence[Clause]:
        if not isinstance(phrase, PhraseStrength):
            return list(phrase)
        if phrase == PhraseStrength.RANDOM:
            clauses = create_random_phrase_description(self.preset_randomness)
            logger.debug("Random strength picked a %d-clause preset", len(clauses))
            return clauses
        return create_phrase_description(phrase)


__all__ = [
    'ReadablePassphraseGenerator',
]

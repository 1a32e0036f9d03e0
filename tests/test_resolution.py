"""
Tests for Word Resolution
=========================
Tests for passphrasekit/phrase/resolution.py: word choice, exclusion,
article agreement and writing to sinks.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passphrasekit.dictionary import WordDictionary
from passphrasekit.errors import DictionaryExhaustedError, StructureError
from passphrasekit.phrase.clauses import NounClause, VerbClause
from passphrasekit.phrase.expansion import expand
from passphrasekit.phrase.resolution import resolve, write_words
from passphrasekit.phrase.templates import (
    AdjectiveTemplate,
    ArticleTemplate,
    NounTemplate,
    PrepositionTemplate,
    VerbTemplate,
)
from passphrasekit.randomness import FastRandomSource
from passphrasekit.sinks import TextSink
from passphrasekit.words import Adjective, Article, Noun, Preposition, Verb, VerbTense


def words_for(templates, dictionary, rng):
    return list(resolve(templates, dictionary, rng))


class TestArticleAgreement:
    """The article takes its form from the word that follows it."""

    @pytest.mark.parametrize("noun, expected", [
        (Noun('cat', 'cats'), 'a'),
        (Noun('owl', 'owls'), 'an'),
        (Noun('hour', 'hours', vowel_onset=True), 'an'),
        (Noun('unicorn', 'unicorns'), 'a'),
        (Noun('unicorn', 'unicorns', vowel_onset=False), 'a'),
    ])
    def test_indefinite_before_noun(self, first_choice, noun, expected):
        dictionary = WordDictionary([noun])
        words = words_for([ArticleTemplate(definite=False), NounTemplate()], dictionary, first_choice)
        assert words == [expected, noun.singular]

    def test_adjective_decides_form(self, first_choice):
        dictionary = WordDictionary([Adjective('orange'), Noun('cat', 'cats')])
        templates = [ArticleTemplate(definite=False), AdjectiveTemplate(), NounTemplate()]
        assert words_for(templates, dictionary, first_choice) == ['an', 'orange', 'cat']

    def test_definite(self, first_choice):
        dictionary = WordDictionary([Noun('owl', 'owls')])
        words = words_for([ArticleTemplate(definite=True), NounTemplate()], dictionary, first_choice)
        assert words == ['the', 'owl']

    def test_dictionary_article_is_used(self, first_choice):
        dictionary = WordDictionary([
            Noun('owl', 'owls'),
            Article(definite='ye', indefinite='one', indefinite_before_vowel='one'),
        ])
        words = words_for([ArticleTemplate(definite=True), NounTemplate()], dictionary, first_choice)
        assert words == ['ye', 'owl']

    def test_two_articles_in_a_row(self, first_choice, small_dictionary):
        templates = [ArticleTemplate(), ArticleTemplate(), NounTemplate()]
        with pytest.raises(StructureError):
            words_for(templates, small_dictionary, first_choice)

    def test_trailing_article(self, first_choice, small_dictionary):
        with pytest.raises(StructureError):
            words_for([NounTemplate(), ArticleTemplate()], small_dictionary, first_choice)


class TestExclusion:
    """Tracked words never repeat inside one phrase."""

    def test_distinct_nouns(self, first_choice):
        dictionary = WordDictionary([Noun('cat'), Noun('dog'), Noun('fox')])
        words = words_for([NounTemplate()] * 3, dictionary, first_choice)
        assert words == ['cat', 'dog', 'fox']

    def test_exhausted(self, first_choice):
        dictionary = WordDictionary([Noun('cat'), Noun('dog')])
        with pytest.raises(DictionaryExhaustedError) as exc_info:
            words_for([NounTemplate()] * 3, dictionary, first_choice)
        assert exc_info.value.category == 'noun'

    def test_singular_and_plural_share_identity(self, first_choice):
        dictionary = WordDictionary([Noun('cat', 'cats')])
        with pytest.raises(DictionaryExhaustedError):
            words_for([NounTemplate(plural=False), NounTemplate(plural=True)], dictionary, first_choice)

    def test_adjectives_never_repeat(self):
        dictionary = WordDictionary([Adjective(a) for a in ('red', 'blue', 'green', 'tall')] + [Noun('cat')])
        templates = [AdjectiveTemplate()] * 4 + [NounTemplate()]
        for seed in range(50):
            words = words_for(templates, dictionary, FastRandomSource(seed=seed))
            assert len(set(words[:4])) == 4

    def test_prepositions_may_repeat(self, first_choice):
        dictionary = WordDictionary([Preposition('with'), Noun('cat'), Noun('dog')])
        templates = [PrepositionTemplate(), NounTemplate(), PrepositionTemplate(), NounTemplate()]
        assert words_for(templates, dictionary, first_choice) == ['with', 'cat', 'with', 'dog']

    def test_exclusion_is_local_to_each_call(self, first_choice):
        dictionary = WordDictionary([Noun('cat')])
        assert words_for([NounTemplate()], dictionary, first_choice) == ['cat']
        assert words_for([NounTemplate()], dictionary, first_choice) == ['cat']

    def test_mass_noun_skipped_for_plural(self, first_choice):
        dictionary = WordDictionary([Noun('rice'), Noun('cat', 'cats')])
        assert words_for([NounTemplate(plural=True)], dictionary, first_choice) == ['cats']


class TestVerbAgreement:
    """The verb form agrees with the subject's plurality."""

    def test_pending_verb_rejected(self, first_choice, small_dictionary):
        with pytest.raises(StructureError):
            words_for([VerbTemplate()], small_dictionary, first_choice)

    def test_agreement_over_many_phrases(self, small_dictionary):
        singular_forms = {'chases', 'sees', 'hides'}
        plural_forms = {'chase', 'see', 'hide'}
        plural_nouns = {'cats', 'dogs', 'foxes', 'owls'}
        clauses = [NounClause(), VerbClause(), NounClause()]

        rng = FastRandomSource(seed=2024)
        for _ in range(100):
            words = words_for(expand(clauses, rng), small_dictionary, rng)
            verb_index = next(i for i, w in enumerate(words) if w in singular_forms | plural_forms)
            subject = words[verb_index - 1]
            if subject in plural_nouns:
                assert words[verb_index] in plural_forms
            else:
                assert words[verb_index] in singular_forms

    def test_missing_form_is_skipped(self, first_choice):
        dictionary = WordDictionary([
            Verb.from_forms({(VerbTense.PRESENT, False): 'runs'}),
            Verb.from_forms({(VerbTense.PRESENT, False): 'walks', (VerbTense.PRESENT, True): 'walk'}),
        ])
        template = VerbTemplate(tense=VerbTense.PRESENT, subject_is_plural=True)
        assert words_for([template], dictionary, first_choice) == ['walk']


class TestWriteWords:
    """Tests for write_words()."""

    def test_single_spaces(self):
        sink = TextSink()
        write_words(['the', 'cat', 'is running'], sink)
        assert sink.finalize() == 'the cat is running'

    def test_no_spaces(self):
        sink = TextSink()
        write_words(['the', 'cat', 'is running'], sink, include_spaces=False)
        assert sink.finalize() == 'thecatisrunning'

    def test_empty(self):
        sink = TextSink()
        write_words([], sink)
        assert sink.finalize() == ''

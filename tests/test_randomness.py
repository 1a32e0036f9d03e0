"""
Tests for Random Sources
========================
Tests for passphrasekit/randomness.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conftest import FirstChoiceRandom
from passphrasekit.randomness import (
    CryptoRandomSource,
    FastRandomSource,
    get_random_source,
    get_rng,
)


class TestSources:
    """Tests for the crypto and fast sources."""

    @pytest.mark.parametrize("source", [CryptoRandomSource(), FastRandomSource(seed=1)])
    def test_next_int_range(self, source):
        values = {source.next_int(5) for _ in range(500)}
        assert values == {0, 1, 2, 3, 4}

    @pytest.mark.parametrize("source", [CryptoRandomSource(), FastRandomSource(seed=1)])
    def test_next_int_bound(self, source):
        assert source.next_int(1) == 0
        with pytest.raises(ValueError):
            source.next_int(0)

    @pytest.mark.parametrize("source", [CryptoRandomSource(), FastRandomSource(seed=1)])
    def test_next_bytes(self, source):
        assert len(source.next_bytes(16)) == 16
        assert source.next_bytes(0) == b''

    def test_fast_is_reproducible(self):
        a = FastRandomSource(seed=42)
        b = FastRandomSource(seed=42)
        assert [a.next_int(1000) for _ in range(20)] == [b.next_int(1000) for _ in range(20)]
        assert a.next_bytes(8) == b.next_bytes(8)

    def test_coin_flip(self):
        rng = FastRandomSource(seed=3)
        assert {rng.coin_flip() for _ in range(100)} == {True, False}


class TestWeightedChoice:
    """Tests for RandomSource.weighted_choice()."""

    def test_zero_weight_never_chosen(self):
        rng = FastRandomSource(seed=7)
        for _ in range(500):
            assert rng.weighted_choice([0, 3, 0, 1]) in (1, 3)

    def test_first_choice_picks_first_enabled(self):
        assert FirstChoiceRandom().weighted_choice([0, 0, 2, 5]) == 2

    def test_proportions(self):
        rng = FastRandomSource(seed=99)
        picks = [rng.weighted_choice([1, 3]) for _ in range(4000)]
        share = picks.count(1) / len(picks)
        assert 0.70 < share < 0.80

    def test_invalid_weights(self):
        rng = FastRandomSource(seed=1)
        with pytest.raises(ValueError):
            rng.weighted_choice([0, 0])
        with pytest.raises(ValueError):
            rng.weighted_choice([])
        with pytest.raises(ValueError):
            rng.weighted_choice([2, -1])


class TestProfiles:
    """Tests for get_random_source()."""

    def test_profiles(self):
        assert isinstance(get_random_source('crypto'), CryptoRandomSource)
        assert isinstance(get_random_source('FAST'), FastRandomSource)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Available profiles"):
            get_random_source('dice')

    def test_global_instance(self):
        assert get_rng() is get_rng()
        assert isinstance(get_rng(), CryptoRandomSource)

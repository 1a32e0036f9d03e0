"""
Tests for Output Sinks
======================
Tests for passphrasekit/sinks.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passphrasekit.sinks import SecurePhrase, SecureSink, TextSink, Utf8Sink


class TestTextSink:
    """Tests for TextSink."""

    def test_builds_string(self):
        sink = TextSink()
        sink.append('cat')
        sink.append_char('!')
        assert sink.finalize() == 'cat!'

    def test_single_character_only(self):
        with pytest.raises(ValueError):
            TextSink().append_char('ab')

    def test_no_appends_after_finalize(self):
        sink = TextSink()
        sink.finalize()
        with pytest.raises(RuntimeError):
            sink.append_char('a')
        with pytest.raises(RuntimeError):
            sink.finalize()

    def test_wipe(self):
        sink = TextSink()
        sink.append('secret')
        sink.wipe()
        assert sink.finalize() == ''


class TestUtf8Sink:
    """Tests for Utf8Sink."""

    def test_encodes_utf8(self):
        sink = Utf8Sink()
        sink.append('café')
        result = sink.finalize()
        assert isinstance(result, bytearray)
        assert result == 'café'.encode('utf-8')

    def test_wipe_zeroes_buffer(self):
        sink = Utf8Sink()
        sink.append('secret')
        buffer = sink._buffer
        sink.wipe()
        assert all(b == 0 for b in buffer)
        assert sink.finalize() == bytearray()


class TestSecureSink:
    """Tests for SecureSink and SecurePhrase."""

    def _phrase(self, text: str) -> SecurePhrase:
        sink = SecureSink()
        sink.append(text)
        return sink.finalize()

    def test_reveal(self):
        phrase = self._phrase('the cat')
        with phrase.reveal() as plaintext:
            assert plaintext.decode('utf-8') == 'the cat'

    def test_masked_storage(self):
        phrase = self._phrase('a' * 64)
        # A 64-byte all-zero pad is vanishingly unlikely.
        assert bytes(phrase._masked) != b'a' * 64

    def test_plaintext_zeroed_after_reveal(self):
        phrase = self._phrase('secret')
        with phrase.reveal() as plaintext:
            kept = plaintext
        assert all(b == 0 for b in kept)

    def test_repr_hides_content(self):
        phrase = self._phrase('secret')
        assert 'secret' not in repr(phrase)
        assert repr(phrase) == '<SecurePhrase length=6>'

    def test_context_manager_wipes(self):
        with self._phrase('secret') as phrase:
            assert len(phrase) == 6
        assert phrase.is_wiped
        assert len(phrase) == 0

    def test_wipe_zeroes_buffers(self):
        phrase = self._phrase('secret')
        masked, pad = phrase._masked, phrase._pad
        phrase.wipe()
        assert all(b == 0 for b in masked)
        assert all(b == 0 for b in pad)

    def test_sink_wipe(self):
        sink = SecureSink()
        sink.append('secret')
        sink.wipe()
        assert len(sink.finalize()) == 0

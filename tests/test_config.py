"""
Tests for Configuration
=======================
Tests for passphrasekit/config.py and passphrasekit/settings.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passphrasekit.config import Config, get_config, get_strength, list_strengths, load_env, parse_bool
from passphrasekit.phrase.strength import PhraseStrength
from passphrasekit.settings import (
    APP_CONFIG_ENV, APP_CONFIG_PATH, PROJECT_ROOT, app_config_path, get_section, get_setting, load_app_config,
    resolve_path,
)

ENV_KEYS = ('PASSPHRASE_STRENGTH', 'PASSPHRASE_SPACES', 'PASSPHRASE_RANDOM', 'PASSPHRASE_DICTIONARY',
            APP_CONFIG_ENV)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for the app.yaml settings loader."""

    def test_app_config_exists(self):
        assert APP_CONFIG_PATH.exists()
        assert isinstance(load_app_config(), dict)

    def test_get_setting(self):
        assert get_setting("generator.strength") == "normal"
        assert get_setting("generator.include_spaces") is True

    def test_missing_setting(self):
        assert get_setting("generator.nope", "fallback") == "fallback"
        assert get_setting("nope.deeper") is None

    def test_resolve_path(self, tmp_path):
        assert resolve_path("words.yaml") == (PROJECT_ROOT / "words.yaml").resolve()
        assert resolve_path(str(tmp_path)) == tmp_path
        assert resolve_path("words.yaml", base=tmp_path) == (tmp_path / "words.yaml").resolve()

    def test_resolve_path_none(self):
        with pytest.raises(ValueError):
            resolve_path(None)

    def test_get_section(self, clean_env):
        assert get_section("generator")["random_profile"] == "crypto"
        with pytest.raises(KeyError):
            get_section("nope")

    def test_env_override(self, clean_env, tmp_path):
        path = tmp_path / 'app.yaml'
        path.write_text("generator:\n  strength: insane\n", encoding='utf-8')
        clean_env.setenv(APP_CONFIG_ENV, str(path))
        assert app_config_path() == path
        assert get_setting("generator.strength") == "insane"
        assert get_section("logging") == {}
        assert get_config().strength == PhraseStrength.INSANE

    def test_env_override_relative(self, clean_env, tmp_path):
        (tmp_path / 'local.yaml').write_text("display:\n  entropy_decimals: 4\n", encoding='utf-8')
        clean_env.chdir(tmp_path)
        clean_env.setenv(APP_CONFIG_ENV, 'local.yaml')
        assert get_setting("display.entropy_decimals") == 4

    def test_override_missing(self, clean_env, tmp_path):
        clean_env.setenv(APP_CONFIG_ENV, str(tmp_path / 'missing.yaml'))
        with pytest.raises(FileNotFoundError):
            load_app_config()

    @pytest.mark.parametrize("text", ["- generator\n", "generator: fast\n"])
    def test_malformed_config(self, tmp_path, text):
        path = tmp_path / 'app.yaml'
        path.write_text(text, encoding='utf-8')
        with pytest.raises(ValueError):
            load_app_config(path)


class TestStrengths:
    """Tests for strength lookup."""

    def test_get_strength(self):
        assert get_strength('Strong') == PhraseStrength.STRONG
        assert get_strength(' insane ') == PhraseStrength.INSANE
        assert get_strength(PhraseStrength.NORMAL) == PhraseStrength.NORMAL

    def test_unknown(self):
        with pytest.raises(ValueError, match="Available strengths"):
            get_strength('mighty')

    def test_list(self):
        strengths = list_strengths()
        assert set(strengths) == {s.value for s in PhraseStrength}
        assert all(strengths.values())


class TestParseBool:
    """Tests for parse_bool()."""

    @pytest.mark.parametrize("value", ['1', 'true', 'Yes', 'ON', True])
    def test_true(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ['0', 'false', 'No', 'off', False])
    def test_false(self, value):
        assert parse_bool(value) is False

    def test_default(self):
        assert parse_bool(None, default=False) is False

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_bool('maybe')


class TestGetConfig:
    """Tests for get_config()."""

    def test_defaults(self, clean_env, tmp_path):
        config = get_config(tmp_path / 'missing.env')
        assert config == Config()

    def test_environment_overrides(self, clean_env, tmp_path):
        clean_env.setenv('PASSPHRASE_STRENGTH', 'insane')
        clean_env.setenv('PASSPHRASE_SPACES', 'no')
        clean_env.setenv('PASSPHRASE_RANDOM', 'fast')
        clean_env.setenv('PASSPHRASE_DICTIONARY', 'words.yaml')
        config = get_config(tmp_path / 'missing.env')
        assert config.strength == PhraseStrength.INSANE
        assert config.include_spaces is False
        assert config.random_profile == 'fast'
        assert config.dictionary_path == 'words.yaml'

    def test_env_file(self, clean_env, tmp_path):
        # Pre-set so load_env's setdefault leaves os.environ untouched after the test.
        clean_env.setenv('PASSPHRASE_STRENGTH', 'normal')
        env_file = tmp_path / '.env'
        env_file.write_text("# local overrides\nPASSPHRASE_STRENGTH=strong\n", encoding='utf-8')
        assert load_env(env_file) == {'PASSPHRASE_STRENGTH': 'strong'}
        assert get_config(env_file).strength == PhraseStrength.STRONG

    def test_invalid_strength(self, clean_env, tmp_path):
        clean_env.setenv('PASSPHRASE_STRENGTH', 'mighty')
        with pytest.raises(ValueError):
            get_config(tmp_path / 'missing.env')

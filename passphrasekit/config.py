#!/usr/bin/env python3
"""
Configuration Management
========================
Generator defaults from configs/app.yaml, overridden by a .env file or the
environment. Also describes the phrase strength presets.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .phrase.strength import PhraseStrength
from .settings import get_section


# =============================================================================
# Strength Profiles
# =============================================================================

STRENGTH_PROFILES = {
    PhraseStrength.NORMAL: {
        "description": "Noun, verb, noun with articles: 'the fox ate a lemon'",
    },
    PhraseStrength.STRONG: {
        "description": "Adds adjectives, adverbs and every tense: 'a lazy fox has quietly eaten the shiny lemon'",
    },
    PhraseStrength.INSANE: {
        "description": "Two linked clauses with a compound subject and prepositions",
    },
    PhraseStrength.RANDOM: {
        "description": "Picks normal, strong or insane at random for each phrase",
    },
    PhraseStrength.CUSTOM: {
        "description": "Uses a phrase description file (YAML)",
    },
}


def get_strength(name) -> PhraseStrength:
    """
    Resolve a strength from its name.

    Raises:
        ValueError: If the name is not a known strength
    """
    if isinstance(name, PhraseStrength):
        return name
    try:
        return PhraseStrength(str(name).strip().lower())
    except ValueError:
        available = ', '.join(s.value for s in PhraseStrength)
        raise ValueError(f"Unknown strength '{name}'. Available strengths: {available}") from None


def list_strengths() -> dict:
    """List all strengths with descriptions."""
    return {
        strength.value: profile["description"]
        for strength, profile in STRENGTH_PROFILES.items()
    }


# =============================================================================
# Application Configuration
# =============================================================================

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off'}


def parse_bool(value, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean '{value}'")


@dataclass
class Config:
    """Application configuration"""
    strength: PhraseStrength = PhraseStrength.NORMAL
    include_spaces: bool = True
    random_profile: str = "crypto"
    count: int = 1
    dictionary_path: Optional[str] = None


def load_env(env_path: Path = None) -> dict:
    """Load environment variables from .env file."""
    if env_path is None:
        # Look for .env in package parent directory
        env_path = Path(__file__).parent.parent / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text().splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                env_vars[key.strip()] = value.strip()
                # Also set in os.environ for modules that use it directly
                os.environ.setdefault(key.strip(), value.strip())

    return env_vars


def get_config(env_path: Path = None) -> Config:
    """Get configuration from app.yaml defaults and the environment."""
    env = load_env(env_path)
    defaults = get_section("generator")

    def pick(env_key: str, setting_key: str):
        return env.get(env_key) or os.environ.get(env_key) or defaults.get(setting_key)

    return Config(
        strength=get_strength(pick('PASSPHRASE_STRENGTH', 'strength') or PhraseStrength.NORMAL),
        include_spaces=parse_bool(pick('PASSPHRASE_SPACES', 'include_spaces'), default=True),
        random_profile=pick('PASSPHRASE_RANDOM', 'random_profile') or "crypto",
        count=int(defaults.get('count') or 1),
        dictionary_path=pick('PASSPHRASE_DICTIONARY', 'dictionary'),
    )

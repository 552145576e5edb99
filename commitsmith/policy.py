"""Commit message policy configuration.

Contains:
- PolicyConfig: Pydantic model for the accepted verbs and quoted keywords
- load_policy_config_from_dict: Build a PolicyConfig from a configuration dictionary
- policy_config_to_dict: Convert a PolicyConfig to a dictionary for saving
"""

import re

from pydantic import BaseModel, ValidationError, field_validator

from commitsmith.exceptions import ConfigError
from commitsmith.vocabulary import KEYWORDS, VERBS

WORD_REGEX = re.compile(r"[A-Za-z]+")


class PolicyConfig(BaseModel):
    """Policy applied to commit messages.

    Attributes:
        verbs: Accepted leading verbs, matched case-sensitively.
        extra_keywords: Words quoted in addition to the built-in KEYWORDS.
    """

    verbs: list[str] = list(VERBS)
    extra_keywords: list[str] = []

    @field_validator("verbs", mode="before")
    @classmethod
    def verbs_must_not_be_empty(cls, v):
        """Ensure at least one verb is configured and each is a single word."""
        if v is None:
            return list(VERBS)
        if isinstance(v, str):
            v = [v]
        cleaned = [str(verb).strip() for verb in v if verb and str(verb).strip()]
        if not cleaned:
            raise ValueError("verbs cannot be empty")
        for verb in cleaned:
            if not WORD_REGEX.fullmatch(verb):
                raise ValueError(f"verb must be a single English word: {verb!r}")
        return cleaned

    @field_validator("extra_keywords", mode="before")
    @classmethod
    def ensure_keywords_list(cls, v):
        """Ensure extra_keywords is a list of non-empty words."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [str(word).strip() for word in v if word and str(word).strip()]

    @property
    def keywords(self) -> tuple[str, ...]:
        """Built-in keywords followed by the configured extra keywords."""
        if not self.extra_keywords:
            return KEYWORDS
        return KEYWORDS + tuple(w for w in self.extra_keywords if w not in KEYWORDS)


def load_policy_config_from_dict(config_dict: dict) -> PolicyConfig:
    """Load PolicyConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with "verbs" and "extra_keywords" keys.

    Returns:
        PolicyConfig instance.

    Raises:
        ConfigError: If the values are invalid.
    """
    try:
        return PolicyConfig(
            verbs=config_dict.get("verbs"),
            extra_keywords=config_dict.get("extra_keywords"),
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid commitsmith configuration: {e}")


def policy_config_to_dict(config: PolicyConfig) -> dict:
    """Convert PolicyConfig to a dictionary for saving."""
    return {
        "verbs": list(config.verbs),
        "extra_keywords": list(config.extra_keywords),
    }

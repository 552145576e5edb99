"""Repository configuration management for commitsmith.

Handles reading and writing the .commitsmith/config.yaml file in each repository.
"""

from pathlib import Path
from typing import Optional

import yaml

from commitsmith.policy import PolicyConfig, load_policy_config_from_dict
from commitsmith.vocabulary import VERBS


# Default configuration values
DEFAULT_CONFIG = {
    "verbs": list(VERBS),
    "extra_keywords": [],
}


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .commitsmith/config.yaml.
    """
    return repo_root / ".commitsmith" / "config.yaml"


def _default_config() -> dict:
    return {key: list(value) for key, value in DEFAULT_CONFIG.items()}


def load_config(repo_root: Path) -> dict:
    """Load the commitsmith configuration from config.yaml.

    If the file doesn't exist, creates it with default values.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        config = _default_config()
        save_config(repo_root, config)
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError:
        # If config is corrupted, return defaults
        return _default_config()

    if not isinstance(config, dict):
        return _default_config()

    # Merge with defaults for any missing keys
    for key, value in _default_config().items():
        if key not in config:
            config[key] = value
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration dictionary to save.
    """
    config_file = get_config_file(repo_root)
    config_file.parent.mkdir(exist_ok=True)

    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
        )


def load_policy(repo_root: Optional[Path]) -> PolicyConfig:
    """Load the policy for a repository.

    Args:
        repo_root: The repository root, or None outside a repository.

    Returns:
        PolicyConfig from the repository config, or the defaults.

    Raises:
        ConfigError: If the configured values are invalid.
    """
    if repo_root is None:
        return PolicyConfig()
    return load_policy_config_from_dict(load_config(repo_root))


def get_verbs(repo_root: Path) -> list[str]:
    """Get the list of accepted leading verbs from config."""
    config = load_config(repo_root)
    return config.get("verbs") or list(VERBS)


def add_verb(repo_root: Path, verb: str) -> bool:
    """Add a verb to the accepted list.

    Returns:
        True if the verb was added, False if it was already present.

    Raises:
        ConfigError: If the verb is not a single English word.
    """
    config = load_config(repo_root)
    verbs = config.get("verbs") or list(VERBS)
    if verb in verbs:
        return False
    config["verbs"] = load_policy_config_from_dict({"verbs": verbs + [verb]}).verbs
    save_config(repo_root, config)
    return True


def remove_verb(repo_root: Path, verb: str) -> bool:
    """Remove a verb from the accepted list.

    Returns:
        True if verb was found and removed, False otherwise.

    Raises:
        ConfigError: If removing the verb would leave the list empty.
    """
    config = load_config(repo_root)
    verbs = config.get("verbs") or list(VERBS)
    if verb not in verbs:
        return False
    remaining = [v for v in verbs if v != verb]
    config["verbs"] = load_policy_config_from_dict({"verbs": remaining}).verbs
    save_config(repo_root, config)
    return True

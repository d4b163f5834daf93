"""Lint configuration management for ticketlint.

Handles the .ticketlint.yaml file in a repository:
- extends: Base rule bundles evaluated by the host linter
- rules: Rule name -> [severity, applicability]
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from ticketlint.exceptions import RuleConfigError
from ticketlint.rules import (
    CONVENTIONAL_BASE_RULESET,
    SUBJECT_PREFIX_RULE_NAME,
    RuleApplicability,
    RuleSetting,
    RuleSeverity,
)

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".ticketlint.yaml"

# Default configuration values
DEFAULT_CONFIG = {
    "extends": [CONVENTIONAL_BASE_RULESET],
    "rules": {
        SUBJECT_PREFIX_RULE_NAME: [int(RuleSeverity.ERROR), RuleApplicability.ALWAYS.value],
    },
}


def _default_rules() -> Dict[str, RuleSetting]:
    return {
        name: RuleSetting.from_value(value)
        for name, value in DEFAULT_CONFIG["rules"].items()
    }


@dataclass
class LintConfig:
    """Rule set configuration consumed by lint_commit."""

    extends: list[str] = field(default_factory=lambda: list(DEFAULT_CONFIG["extends"]))
    rules: Dict[str, RuleSetting] = field(default_factory=_default_rules)


def load_lint_config_from_dict(config_dict: Dict[str, Any]) -> LintConfig:
    """Load LintConfig from a configuration dictionary.

    Missing sections fall back to DEFAULT_CONFIG. A `rules` section replaces
    the default rules rather than merging with them.

    Args:
        config_dict: Dictionary with lint configuration.

    Returns:
        LintConfig instance.

    Raises:
        RuleConfigError: If a section or rule entry is invalid.
    """
    if not isinstance(config_dict, dict):
        raise RuleConfigError(f"Lint configuration must be a mapping, got {type(config_dict).__name__}")

    extends = config_dict.get("extends", DEFAULT_CONFIG["extends"])
    if isinstance(extends, str):
        extends = [extends]
    if not isinstance(extends, list) or not all(isinstance(e, str) for e in extends):
        raise RuleConfigError(f"'extends' must be a list of strings, got {extends!r}")

    rules_section = config_dict.get("rules", DEFAULT_CONFIG["rules"])
    if not isinstance(rules_section, dict):
        raise RuleConfigError(f"'rules' must be a mapping, got {rules_section!r}")

    rules = {}
    for name, value in rules_section.items():
        try:
            rules[str(name)] = RuleSetting.from_value(value)
        except RuleConfigError as e:
            raise RuleConfigError(f"Rule '{name}': {e}")

    return LintConfig(extends=list(extends), rules=rules)


def lint_config_to_dict(config: LintConfig) -> Dict[str, Any]:
    """Convert LintConfig to a dictionary for saving.

    Args:
        config: LintConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "extends": list(config.extends),
        "rules": {name: setting.to_value() for name, setting in config.rules.items()},
    }


def get_config_file_path(repo_root: Path) -> Path:
    """Get path to the lint config file of a repository.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to <repo_root>/.ticketlint.yaml
    """
    return Path(repo_root) / CONFIG_FILE_NAME


def load_lint_config(config_file: Path) -> LintConfig:
    """Load lint configuration from a YAML file.

    Args:
        config_file: Path to the YAML file.

    Returns:
        LintConfig instance. Defaults if the file doesn't exist.

    Raises:
        RuleConfigError: If the file cannot be read, parsed, or validated.
    """
    config_file = Path(config_file)

    if not config_file.exists():
        logger.debug("No lint config at %s, using defaults", config_file)
        return LintConfig()

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise RuleConfigError(f"Failed to load config from {config_file}: {e}")

    return load_lint_config_from_dict(data)


def save_lint_config(config: LintConfig, config_file: Path) -> None:
    """Save lint configuration to a YAML file.

    Args:
        config: LintConfig to save.
        config_file: Destination path.

    Raises:
        RuleConfigError: If the file cannot be written.
    """
    config_file = Path(config_file)
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(lint_config_to_dict(config), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise RuleConfigError(f"Failed to save config to {config_file}: {e}")

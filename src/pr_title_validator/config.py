"""
Validator configuration.

Values come from the GitHub Actions environment:
- GITHUB_EVENT_NAME / GITHUB_EVENT_PATH: the triggering event
- INPUT_TYPES: comma-separated allow-list of types
- INPUT_SCOPES: comma-separated list of scope patterns
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .title.parser import trim_space
from .title.validator import DEFAULT_TYPES

logger = logging.getLogger(__name__)


def parse_comma_separated_list(value: str) -> List[str]:
    """
    Split a comma-separated input and trim every item.

    Empty items and order are preserved and nothing is deduplicated, so ""
    yields [""]. Callers decide what an empty input means.
    """
    return [trim_space(item) for item in value.split(",")]


@dataclass
class ValidatorConfig:
    """Inputs of a validation run"""
    event_name: str = ""
    event_path: str = ""
    types: str = ""
    scopes: str = ""
    title_override: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ValidatorConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ValidatorConfig
        """
        env = os.environ if environ is None else environ
        return cls(
            event_name=env.get("GITHUB_EVENT_NAME", ""),
            event_path=env.get("GITHUB_EVENT_PATH", ""),
            types=env.get("INPUT_TYPES", ""),
            scopes=env.get("INPUT_SCOPES", "")
        )

    def resolved_types(self) -> List[str]:
        """Allowed types, falling back to the built-in list when unset."""
        if self.types == "":
            logger.warning("no custom list of commit types passed, using fallback")
            return list(DEFAULT_TYPES)

        return parse_comma_separated_list(self.types)

    def resolved_scopes(self) -> List[str]:
        """Scope patterns; an empty list means any scope is accepted."""
        if self.scopes == "":
            logger.warning("no custom list of commit scopes passed, using fallback")
            return []

        return parse_comma_separated_list(self.scopes)

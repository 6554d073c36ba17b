"""
Pull request title parsing.

Titles follow a single fixed grammar: type(scope): message

where:
- type: The kind of change (feat, fix, docs, etc.)
- scope: Optional parenthetical context (api, package/utils, ...)
- message: Free text after the first colon
"""

import logging
import re
from dataclasses import dataclass
from typing import Tuple

from ..errors import MissingSeparatorError, MissingTypeError

logger = logging.getLogger(__name__)

DESIRED_FORMAT = "<type>(optional: <scope>): <message>"

# First non-empty parenthetical in the prefix
SCOPE_PATTERN = re.compile(r"\(([^)]+)\)")

# Unicode White_Space characters. str.strip() would also drop \x1c-\x1f.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim_space(value: str) -> str:
    """Strip leading and trailing Unicode White_Space."""
    return value.strip(WHITESPACE)


@dataclass(frozen=True)
class TitleComponents:
    """Parsed pieces of a pull request title."""

    type: str
    scope: str
    message: str


def extract_type_and_scope(prefix: str) -> Tuple[str, str]:
    """
    Split the part before the colon into type and scope.

    An unclosed or empty parenthetical is not a scope; the whole prefix is
    then returned as the type, verbatim.

    Args:
        prefix: Title text before the first colon

    Returns:
        Tuple of (type, scope); scope is "" when absent
    """
    prefix = trim_space(prefix)

    if "(" in prefix and ")" in prefix:
        match = SCOPE_PATTERN.search(prefix)
        if match:
            title_type = trim_space(prefix.split("(", 1)[0])
            return title_type, match.group(1)

    return prefix, ""


def parse_title(title: str) -> TitleComponents:
    """
    Parse a pull request title.

    Only the first colon separates prefix from message; any later colons
    belong to the message.

    Args:
        title: Raw pull request title

    Returns:
        TitleComponents

    Raises:
        MissingSeparatorError: title contains no colon
        MissingTypeError: nothing precedes the colon
    """
    prefix, separator, message = title.partition(":")
    if not separator:
        logger.error(
            "title must include a message after the colon",
            extra={"extra_data": {"desired_format": DESIRED_FORMAT, "title": title}}
        )
        raise MissingSeparatorError(
            "title missing colon separator",
            {"title": title, "desired_format": DESIRED_FORMAT}
        )

    title_type, title_scope = extract_type_and_scope(prefix)

    if not title_type:
        logger.error(
            "title must include a type",
            extra={"extra_data": {"desired_format": DESIRED_FORMAT, "title": title}}
        )
        raise MissingTypeError(
            "title missing type",
            {"title": title, "desired_format": DESIRED_FORMAT}
        )

    return TitleComponents(
        type=title_type,
        scope=title_scope,
        message=trim_space(message)
    )

"""Keyword -> replacement substitution for comment text.

Typically maps a team keyword such as ``@Designer`` to a Discord role
mention. Matching is literal and case-sensitive, and also hits inside
larger words (``@Designers`` has its ``@Designer`` prefix replaced).
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from figma_relay.models.rules import ReplaceRule


class WordReplacer:
    """Compiled set of replace rules, combined into one alternation pattern.

    Rule order is precedence: at any position the first listed rule that
    matches wins, and for duplicate words the first replacement is used.
    """

    def __init__(self, rules: Iterable[ReplaceRule]) -> None:
        self._replacements: dict[str, str] = {}
        for rule in rules:
            if rule.word:  # an empty word would match between every character
                self._replacements.setdefault(rule.word, rule.replacement)

        self._pattern: re.Pattern[str] | None = None
        if self._replacements:
            self._pattern = re.compile(
                "|".join(f"({re.escape(word)})" for word in self._replacements)
            )

    def replace(self, text: str | None) -> str | None:
        """Replace every configured word in text. Identity when no rules are configured."""
        if self._pattern is None or not text:
            return text
        return self._pattern.sub(self._substitute, text)

    def _substitute(self, match: re.Match[str]) -> str:
        return self._replacements.get(match.group(0), match.group(0))


@lru_cache
def get_word_replacer(rules: tuple[ReplaceRule, ...]) -> WordReplacer:
    """Return a cached replacer for the given rules (compiled once per rule set)."""
    return WordReplacer(rules)

"""Comment text transformation."""

from figma_relay.text.substitution import WordReplacer, get_word_replacer

__all__ = ["WordReplacer", "get_word_replacer"]

"""Parser configuration options."""

from dataclasses import dataclass

DEFAULT_MAX_NESTING_DEPTH = 256


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits and cosmetic switches for one parse.

    Parsing is always fail-fast: the first malformed construct aborts.
    """

    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    normalize_tag_whitespace: bool = True

    def __post_init__(self):
        if self.max_nesting_depth < 1:
            raise ValueError("max_nesting_depth must be >= 1")

"""Parser configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Knobs for one parse call.

    - `max_depth`: bound on rule recursion depth; None leaves it to the
      interpreter's own recursion limit, which is still reported as a
      ParseDepthError.
    - `memoize`: cache each (rule, token index) attempt for the duration of
      the call. The resulting tree is the same; repeated backtracking over
      the same input gets cheaper.
    - `allow_trailing_ignored`: accept ignored tokens (whitespace, comments)
      left over after the entry rule matched.
    """

    max_depth: int | None = None
    memoize: bool = False
    allow_trailing_ignored: bool = True

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

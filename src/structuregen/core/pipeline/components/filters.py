from __future__ import annotations

"""
Entry Filtering Engine.

Compiles ignore patterns into matchers once per run and applies the
ignore and extension rules to directory entries. Plain patterns match a
name exactly or as a prefix; patterns holding a wildcard are translated
into a regex searched anywhere in the name.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from structuregen.domain.tree_models import DirEntry

WILDCARD_CHARS = ("*", "?")

# -----------------------------------------------------------------------------
# MATCHER MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IgnoreMatcher:
    """
    Precompiled ignore rule.

    Attributes:
        pattern: Raw pattern as supplied by the user or the defaults.
        regex: Compiled regex for wildcard patterns, None for plain ones.
    """
    pattern: str
    regex: Optional[re.Pattern] = None

    def matches(self, name: str) -> bool:
        if self.regex is not None:
            return self.regex.search(name) is not None
        return name.startswith(self.pattern)

# -----------------------------------------------------------------------------
# PATTERN COMPILATION
# -----------------------------------------------------------------------------

def is_wildcard(pattern: str) -> bool:
    return any(ch in pattern for ch in WILDCARD_CHARS)


def glob_to_regex(pattern: str) -> str:
    """
    Translate a wildcard pattern into an unanchored regex string.

    '*' matches any run of characters and '?' a single character;
    everything else is matched literally.

    Args:
        pattern: Raw wildcard pattern (e.g. '*.log').

    Returns:
        str: Equivalent regex source.
    """
    parts: List[str] = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return "".join(parts)


def compile_ignore_patterns(patterns: Iterable[str]) -> List[IgnoreMatcher]:
    """
    Transform raw ignore patterns into matcher objects.

    Empty patterns are discarded.

    Args:
        patterns: Ignore patterns in configuration order.

    Returns:
        List[IgnoreMatcher]: Compiled matchers.
    """
    compiled: List[IgnoreMatcher] = []
    for p in patterns:
        if not p:
            continue
        if is_wildcard(p):
            compiled.append(IgnoreMatcher(pattern=p, regex=re.compile(glob_to_regex(p))))
        else:
            compiled.append(IgnoreMatcher(pattern=p))
    return compiled

# -----------------------------------------------------------------------------
# ENTRY CLASSIFICATION
# -----------------------------------------------------------------------------

def is_ignored(name: str, matchers: Sequence[IgnoreMatcher]) -> bool:
    """
    Verify if a name is hit by at least one ignore matcher.

    Args:
        name: Filename or directory name to evaluate.
        matchers: Compiled ignore rules.

    Returns:
        bool: True if any rule matches.
    """
    return any(m.matches(name) for m in matchers)


def is_included_extension(entry: DirEntry, include_extensions: Sequence[str]) -> bool:
    """
    Check the extension whitelist for a non-directory entry.

    Directories always pass; an empty whitelist includes every file.
    """
    if entry.is_dir or not include_extensions:
        return True
    return entry.extension in include_extensions


def filter_entries(
        entries: Iterable[DirEntry],
        matchers: Sequence[IgnoreMatcher],
        include_extensions: Sequence[str],
) -> List[DirEntry]:
    """Apply ignore rules first, then the extension whitelist."""
    kept = [e for e in entries if not is_ignored(e.name, matchers)]
    return [e for e in kept if is_included_extension(e, include_extensions)]

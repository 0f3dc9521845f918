#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Target resolution

Turns the host names of a merged config and the user's filters into the
sorted list of hosts to connect to.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Iterable, List

from loguru import logger

from mssh.errors import PatternError

# Hosts starting with this prefix are templates and never launched
TEMPLATE_PREFIX = "_"


class Composition(Enum):
    AND = "AND"
    OR = "OR"


class MatchMode(Enum):
    REGEX = "regex"
    LITERAL = "literal"


@dataclass
class FilterSpec:
    """Filters plus how to match each one and how to combine the results"""

    patterns: List[str] = field(default_factory=list)
    composition: Composition = Composition.AND
    matching: MatchMode = MatchMode.REGEX

    @classmethod
    def from_flags(cls, patterns: Iterable[str], fixed_string: bool = False) -> "FilterSpec":
        """Fixed-string filters are matched literally and OR-ed, regexes are AND-ed."""
        if fixed_string:
            return cls(list(patterns), Composition.OR, MatchMode.LITERAL)
        return cls(list(patterns), Composition.AND, MatchMode.REGEX)


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> "re.Pattern":
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(f"Invalid filter pattern '{pattern}': {e}") from e


def filter_names(names: Iterable[str], pattern: str, matching: MatchMode) -> List[str]:
    """Return the non-template names matched by a single filter, in input order."""
    if matching is MatchMode.REGEX:
        regex = compile_pattern(pattern)
        matches = lambda name: regex.search(name) is not None
    else:
        matches = lambda name: name == pattern

    return [name for name in names if not name.startswith(TEMPLATE_PREFIX) and matches(name)]


def resolve_targets(candidates: Iterable[str], spec: FilterSpec) -> List[str]:
    """
    Resolve filters against the candidate host names.

    AND narrows a working set filter by filter, each step only looking at the
    survivors of the previous one. OR runs every filter against the full
    candidate list and unions the matches. With no filters AND selects every
    non-template host and OR selects nothing.
    """
    everything = [name for name in candidates if not name.startswith(TEMPLATE_PREFIX)]

    if spec.composition is Composition.AND:
        working = everything
        for pattern in spec.patterns:
            working = filter_names(working, pattern, spec.matching)
        targets = working
    else:
        targets = []
        for pattern in spec.patterns:
            targets.extend(filter_names(everything, pattern, spec.matching))
            logger.debug(f"Accumulated targets: {targets}")

    return sorted(set(targets))

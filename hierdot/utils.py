#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot utilities $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# pylint: disable=line-too-long
# $FrauBSD$
# pylint: enable=line-too-long
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""hierdot utilities"""

############################################################ IMPORTS

import re
from typing import Callable, Iterable, Iterator, Union

############################################################ GLOBALS

NamePredicate = Callable[[str], bool]
NamePattern = Union[str, re.Pattern, NamePredicate]

############################################################ FUNCTIONS

def plur(n: int, singular: str, plural: str = None) -> str:
    """Return singular or plural form based on count.

    Args:
        n: The count
        singular: Singular form
        plural: Plural form (default: singular + 's')

    Returns:
        Appropriate grammatical form

    Examples:
        >>> plur(1, 'type')
        'type'
        >>> plur(2, 'type')
        'types'
        >>> plur(2, 'vertex', 'vertices')
        'vertices'
        >>> plur(0, 'class')
        'classes'
    """
    if n == 1:
        return singular

    if plural is not None:
        return plural

    special_plurals = {
        'class': 'classes',
        'vertex': 'vertices',
        'match': 'matches',
        'dependency': 'dependencies',
        'was': 'were',
    }

    if singular in special_plurals:
        return special_plurals[singular]

    return f"{singular}s"


def name_predicate(pattern: NamePattern) -> NamePredicate:
    """Turn a filter pattern into a ``name -> bool`` predicate.

    Strings are compiled as regular expressions. Regular expressions match
    anywhere in the name (``re.search``); anchor with ``^`` for prefixes.
    Callables are returned unchanged.

    Raises:
        re.error: The pattern string is not a valid regular expression.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    if isinstance(pattern, re.Pattern):
        return lambda name: pattern.search(name) is not None
    if callable(pattern):
        return pattern
    raise TypeError(f"Not a pattern or predicate: {pattern!r}")


def unique(items: Iterable) -> Iterator:
    """Yield items in order, skipping repeats (by identity/hash)."""
    seen = set()
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        yield item


################################################################################
# END
################################################################################

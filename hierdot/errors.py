#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot exceptions $
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

"""Exceptions raised by hierdot."""

############################################################ CLASSES

class HierdotError(Exception):
    """Base class for all hierdot errors."""


class ManifestError(HierdotError, ValueError):
    """A manifest document is malformed or references unknown entities."""


class UnknownEntityError(HierdotError, LookupError):
    """A type or module lookup by name found nothing."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"Unknown {kind}: {name}")
        self.kind = kind
        self.name = name


################################################################################
# END
################################################################################

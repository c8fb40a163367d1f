#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot version information $
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

"""Version information for the hierdot package and CLI."""

############################################################ GLOBALS

VERSION = '0.3.0'
VERSION_VERBOSE = f"{VERSION} - $Branch$ - $Date$"

################################################################################
# END
################################################################################

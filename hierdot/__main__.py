#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot module entry point $
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

"""Allow ``python -m hierdot``."""

############################################################ IMPORTS

import sys

from .hierdot import main

############################################################ MAIN

if __name__ == '__main__':
    sys.exit(main())

################################################################################
# END
################################################################################

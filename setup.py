#!/usr/bin/env python3
# -*- tab-width: 4 -*- ;; Emacs
# vi: set ts=4 sw=4 noet :: Vi/ViM
############################################################ IDENT(1)
#
# $Title: Python setup for hierdot $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# $FrauBSD$
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""Setup script for hierdot."""

############################################################ IMPORTS

from setuptools import setup, find_packages
from pathlib import Path

############################################################ GLOBALS

# Read version from version.py
version = {}
with open('hierdot/version.py') as f:
	exec(f.read(), version)

# Read README if it exists
readme_file = Path(__file__).parent / 'README.md'
long_description = readme_file.read_text() if readme_file.exists() else ''

############################################################ SETUP

setup(
	name='hierdot',
	version=version['VERSION'],
	description='Class hierarchy and module dependency graphs for Python',
	long_description=long_description,
	long_description_content_type='text/markdown',
	author='Devin Teske',
	author_email='dteske@FreeBSD.org',
	url='https://github.com/FrauBSD/hierdot',
	packages=find_packages(exclude=['tests', 'tests.*']),
	entry_points={
		'console_scripts': [
			'hierdot=hierdot.__main__:main',
		],
	},
	extras_require={
		'test': ['pytest'],
	},
	python_requires='>=3.8',
	classifiers=[
		'Development Status :: 3 - Alpha',
		'Intended Audience :: Developers',
		'Topic :: Software Development :: Documentation',
		'Topic :: Scientific/Engineering :: Visualization',
		'Programming Language :: Python :: 3',
		'Programming Language :: Python :: 3.8',
		'Programming Language :: Python :: 3.9',
		'Programming Language :: Python :: 3.10',
		'Programming Language :: Python :: 3.11',
		'Programming Language :: Python :: 3.12',
		'Programming Language :: Python :: 3.13',
	],
	keywords='class-hierarchy dependency-graph graphviz dot introspection',
)

################################################################################
# END
################################################################################

#!/usr/bin/env python
"""A setuptools-based script for installing subcmd."""

# Note: this exists for packaging tools that still invoke setup.py directly.
#       All of the project metadata lives in pyproject.toml.

import setuptools

if __name__ == "__main__":
    setuptools.setup()

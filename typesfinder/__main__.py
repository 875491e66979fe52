#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
typesfinder/__main__.py
=======================

Entry point for ``python -m typesfinder``. See :mod:`typesfinder.main`.
"""

import sys

from typesfinder.main import main

if __name__ == "__main__":
    sys.exit(main())

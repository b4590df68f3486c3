#!/usr/bin/env python3
"""Thin loader delegating CLI logic to the interface layer."""

import sys

from interface import app as _app

if __name__ == "__main__":
    sys.exit(_app.main())

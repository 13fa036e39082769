#!/usr/bin/env python3
"""
Main script for the Droste editor.

Equivalent to running the ``droste-editor`` console script.
"""
import sys

from droste.main import main

if __name__ == "__main__":
    sys.exit(main())

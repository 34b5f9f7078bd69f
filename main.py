#!/usr/bin/env python3
"""
Main entry point for Art Space application.
"""

import sys

from art_space.cli import main

if __name__ == "__main__":
    sys.exit(main())

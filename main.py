#!/usr/bin/env python3
"""
Main entry point for the reading-order pipeline
Reads detected page layouts from JSON, recovers reading order with XY-Cut++ and writes Markdown/JSON
"""

import sys

from readorder.cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Run script for clickup-report."""

import sys

from clickupreport.cli import main

if __name__ == "__main__":
    sys.exit(main())

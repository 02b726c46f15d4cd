#!/usr/bin/env python3
"""
run.py - Main entry point for console Connect Four

Examples:
    python run.py play
    python run.py play --mode 1 --seed 7
    python run.py analyze --position 0,0,0,...
    python run.py benchmark --iterations 500
"""

import sys

from connect_four.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())

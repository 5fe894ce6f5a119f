#!/usr/bin/env python3
"""
termsweeper - Main entry point.

Usage:
    python main.py [--level {1,2,3}] [--seed N]
"""
import sys

from src.termsweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())

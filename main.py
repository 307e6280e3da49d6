#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play WIDTH HEIGHT [--mines N] [--seed S] [--verbose]
    python main.py demo [--preset {beginner,intermediate,expert}] [--seed S]
"""
import sys

from src.minefield.cli import main


if __name__ == "__main__":
    sys.exit(main())

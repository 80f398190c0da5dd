"""Brick schema explorer script entry point.

Usage:
    python main.py --input Brick.ttl describe brick:Setpoint
"""
import sys

from brickshape_py.cli import main

if __name__ == "__main__":
    sys.exit(main())

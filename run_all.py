#!/usr/bin/env python3
"""
Full report script.

Running this file regenerates every table and figure.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

from prime_kernel.cli import main


if __name__ == '__main__':
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Entry point: python main.py parse "太郎は花子にプレゼントをあげた。"
"""
import sys

from kakariuke.cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
import os
import sys

# Ensure script directory is in path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from disktemp.cli import main

if __name__ == "__main__":
    sys.exit(main())

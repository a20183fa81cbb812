"""
Entry point for running the CLI as a module: python -m jwkthumb
"""
import sys

from jwkthumb.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""
Run with: python -m custompainter
"""
import sys

from custompainter.main import main

if __name__ == "__main__":
    sys.exit(main())

"""
Entry Point Script (Bootstrap)
==============================
Starting point of the application for development, without installing the
package.

Usage:
    $ python run.py
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from custompainter.main import main

if __name__ == "__main__":
    sys.exit(main())

"""
Entry Point Script (Bootstrap)
==============================
Development runner located outside the 'src' package.

It prepends 'src' to 'sys.path' so that 'shapemeasure' resolves without
installing the package.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from shapemeasure.main import main

if __name__ == "__main__":
    main()

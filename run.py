"""
Entry Point Script (Bootstrap)
==============================
Development runner that works without installing the package.

It is located outside the 'src' package and puts 'src' on 'sys.path' so that
imports like 'from pythagorastree.model...' resolve.

Usage:
    $ python run.py
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'pythagorastree.PythagorasTree'  # Arbitrary string
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from pythagorastree.__main__ import main

if __name__ == "__main__":
    sys.exit(main())

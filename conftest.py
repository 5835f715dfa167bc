"""
Root conftest.py - Sets up Python path for tests.

Loaded by pytest before collection, so ``import icolor`` resolves to this
checkout even when the package is not installed.
"""
import sys
import os

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

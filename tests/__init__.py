"""
Interleave - Test Suite
=======================
Unit and integration tests for the Interleave backend.
Run with: pytest tests/ -v
"""
import sys
import os

os.environ.setdefault('VERBOSE_DEBUG', 'false')
os.environ.setdefault('LOG_TO_FILE', 'false')

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

"""
Main entry point for combodrill.
Run with: python -m combodrill
"""
import sys

from combodrill.core_manager import main

if __name__ == "__main__":
    sys.exit(main())

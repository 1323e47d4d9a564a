"""Run with: python -m swimmingfish"""
import sys

from swimmingfish.main import main

if __name__ == "__main__":
    sys.exit(main())

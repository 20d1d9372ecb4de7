"""
Run with: python -m minkowskiplot
"""
import sys

from minkowskiplot.main import main

if __name__ == "__main__":
    sys.exit(main())

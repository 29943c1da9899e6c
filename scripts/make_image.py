import os
import sys

# Ensure repository root is on sys.path so `from complexmath...` works when running
# this script directly (e.g. `python scripts/make_image.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from complexmath.cli import main


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python
"""
Entry point for running the validator from a source checkout.

This script sets up the Python path and runs the validator without
installing the package.
"""

import sys
from pathlib import Path

# Add src directory to Python path
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

try:
    import dotenv  # noqa: F401
except ImportError as e:
    print(f"""
Error: Missing required dependencies

{e}

Please install the project first:

    pip install -e .

Then try running again:
    python run.py --title "feat(api): add endpoint"
""")
    sys.exit(1)

from pr_title_validator.main import main


if __name__ == "__main__":
    sys.exit(main())

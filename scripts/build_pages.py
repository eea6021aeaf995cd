"""Site build script.

Run this script to publish the source directory as HTML pages.

Usage:
    python -m scripts.build_pages
    or
    python scripts/build_pages.py (after pip install -e .)
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from codepages.cli import main


if __name__ == "__main__":
    sys.exit(main())

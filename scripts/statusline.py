#!/usr/bin/env python3
"""Status line entry point for settings.json.

Usage:
    echo '{"cwd": "...", "transcript_path": "...", "model": {...}}' | python scripts/statusline.py
"""

import sys
from pathlib import Path

# Add project root to path for statusline.* imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from statusline.cli import main


if __name__ == "__main__":
    sys.exit(main())

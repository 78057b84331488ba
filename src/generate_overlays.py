#!/usr/bin/env python3
"""Regenerate deck overlays from a source checkout.

Same options as the installed ``deck-overlays`` command, e.g.:

    python src/generate_overlays.py --config configs/config.yaml --input decks/talk.pptx
"""

import sys
from pathlib import Path

# Runnable without `pip install -e .`
sys.path.insert(0, str(Path(__file__).resolve().parent))

from deck_overlays.cli import main  # noqa: E402

if __name__ == '__main__':
    sys.exit(main())

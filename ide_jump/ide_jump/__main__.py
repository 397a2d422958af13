"""Allow running as python -m ide_jump."""
import sys

from .main import main

sys.exit(main())

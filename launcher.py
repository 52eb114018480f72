#!/usr/bin/env python3
"""
FontPeek Application Launcher
Entry point for running from a source checkout and for PyInstaller builds.
"""

import sys
from pathlib import Path

# Add the project root to Python path for clean imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def main():
    """Run the viewer, passing command-line options through"""
    from ui.app import main as run_viewer
    run_viewer(sys.argv[1:])


if __name__ == '__main__':
    main()

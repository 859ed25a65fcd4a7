#!/usr/bin/env python3
"""
Interleave - Local Launcher
===========================
Start the backend and open the reader in a browser.

Usage:
    python run.py [--no-browser]
"""
import os
import sys
import threading
import webbrowser
from pathlib import Path

# Add package to path if running directly
package_dir = Path(__file__).parent
if str(package_dir) not in sys.path:
    sys.path.insert(0, str(package_dir))

os.environ.setdefault('INTERLEAVE_APP_DIR', str(package_dir))

from interleave.app import run_server  # noqa: E402
from interleave.config import config  # noqa: E402


def open_browser():
    """Open the frontend once the server has had a moment to start."""
    webbrowser.open(f"http://{config.server.host}:{config.server.port}/")


def main():
    if not config.openai.api_key:
        print("Warning: OPENAI_API_KEY is not set; new translations will fail.")

    if '--no-browser' not in sys.argv:
        threading.Timer(1.5, open_browser).start()

    run_server()


if __name__ == '__main__':
    main()

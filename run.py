#!/usr/bin/env python3
"""Launch the Merit Awards Streamlit app. Extra arguments go to `streamlit run`."""

import subprocess
import sys
from pathlib import Path

APP = Path(__file__).parent / "web" / "streamlit" / "app.py"

if __name__ == "__main__":
    cmd = [sys.executable, "-m", "streamlit", "run", str(APP), *sys.argv[1:]]
    sys.exit(subprocess.run(cmd).returncode)

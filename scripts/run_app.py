#!/usr/bin/env python3
"""
Run bytedump with correct PYTHONPATH (works on Windows and Unix).
Usage: python scripts/run_app.py [args...]
Example: python scripts/run_app.py data.bin --format dec
         cat data.bin | python scripts/run_app.py --passes 2
"""
import os
import subprocess
import sys

script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(script_dir)
src = os.path.join(project_root, "src")

env = os.environ.copy()
env["PYTHONPATH"] = src

sys.exit(
    subprocess.run(
        [sys.executable, "-m", "app.cli"] + sys.argv[1:],
        cwd=project_root,
        env=env,
    ).returncode
)

#!/usr/bin/env python3
"""
Serverless Log Forwarding - resource generator

Entry point script for running without installation.
For installed usage, run: sls-log-forwarding
"""

import sys
from pathlib import Path

# Add src to path for direct execution without installation
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from sls_log_forwarding.cli import main

if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Entry point for running Validify Sentinel."""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv
load_dotenv()

from validify.bot import main

if __name__ == "__main__":
    sys.exit(main())

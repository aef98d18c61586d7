#!/usr/bin/env python3
"""
Enable running partner-app-utils commands via: python -m partner_app_utils

Usage:
    python -m partner_app_utils health
    python -m partner_app_utils validate-config
"""

import sys

from partner_app_utils.cli import main

if __name__ == "__main__":
    sys.exit(main())

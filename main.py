#!/usr/bin/env python3
"""JetCounter entry point.

Run with:
    python main.py
    python -m jetcounter
"""

from jetcounter.__main__ import main


if __name__ == "__main__":
    main()

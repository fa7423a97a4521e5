"""
Entry point for running the vision target resolver as a module.

Usage:
    python -m vision_target [frames.jsonl]
"""

from .cli import main

if __name__ == "__main__":
    main()

"""
Entry point for running the demo as a Python module: `python -m statusblock`

The console script defined in pyproject.toml calls `statusblock.main:main`
directly; both paths end up in the same function.
"""

from .main import main

if __name__ == "__main__":
    main()

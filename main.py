"""
RE:[SSO] Launcher
Starts the launcher window. Same as running the `ress` console script.
"""

from ress.app import main


if __name__ == "__main__":
    raise SystemExit(main())

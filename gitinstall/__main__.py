from __future__ import annotations

from gitinstall.cli.app import main

if __name__ == "__main__":
    main()

import os
import sys

# Add root to pythonpath
sys.path.append(os.getcwd())

from src.app_shell.cli import main  # noqa: E402

if __name__ == "__main__":
    main([*sys.argv[1:], "seed"])

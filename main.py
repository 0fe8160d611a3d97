import sys

from src.core.runtime.main_loop import main

if __name__ == "__main__":
    sys.exit(main())

"""Allows ``python -m membranefiltration``."""
from membranefiltration.main import main

if __name__ == "__main__":
    main()

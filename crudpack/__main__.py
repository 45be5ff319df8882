"""Allow ``python -m crudpack``."""

from crudpack.cli import main

if __name__ == "__main__":
    main()

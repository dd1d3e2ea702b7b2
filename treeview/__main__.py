"""Module entrypoint for ``python -m treeview``."""

from .cli import main


if __name__ == "__main__":
    main()

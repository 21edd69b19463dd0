"""Allow ``python -m create_react_tailwind``."""

from create_react_tailwind.cli import main

if __name__ == "__main__":
    main()

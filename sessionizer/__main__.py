"""Allow `python -m sessionizer`."""

from sessionizer.cli.main import main

if __name__ == "__main__":
    main()

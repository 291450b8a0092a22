"""Entry point for 'python -m coincollector' command."""

from coincollector.cli import main

if __name__ == "__main__":
    main()

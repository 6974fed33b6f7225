"""Command-line interface."""
from shapemeasure.main import main

if __name__ == "__main__":
    main()

# spineapi/__main__.py

from spineapi.cli.main import main

if __name__ == "__main__":
    main()

"""Allow ``python -m vigenere``."""

from .cli import main

if __name__ == '__main__':
    main()

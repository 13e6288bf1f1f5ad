#!/usr/bin/env python3
from blogsite.cli import main

if __name__ == "__main__":
    main()

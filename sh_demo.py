#!/usr/bin/env python
"""CLI entry point for the spherical harmonics projection demo."""

from sh_lighting.demo import main

if __name__ == "__main__":
    main()

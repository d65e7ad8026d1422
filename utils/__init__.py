"""
Helpers around the connectivity package.

Modules:
    loader   - Reading union-find input files
    display  - Rich rendering of sequences and components
"""

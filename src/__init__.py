"""Pattern Gallery - Root Package.

A gallery of small, self-contained demonstrations of classic object-oriented
design patterns, mostly told through coffee machines and coffee orders.

Key Components:
    - domain: The pattern implementations, split into creational and structural
    - config: Configuration schemas, defaults and loading
    - infrastructure: Logging, error handling, the pattern catalog and the
      singleton registry
    - interface: Demo drivers that turn pattern objects into transcripts
    - cli: Command line entry point

Usage:
    >>> pattern-gallery patterns list --format table
    >>> pattern-gallery patterns run decorator
    >>> pattern-gallery patterns run-all
"""

from ._version import __version__

"""Pattern Catalog - Root Package.

This package provides a runnable catalog of classic object-oriented design
patterns. Each pattern lives in its own domain module together with a demo
scenario that narrates what the participating objects do.

Key Components:
    - application: Catalog service and DTOs used by the CLI
    - domain: Pattern implementations grouped by category
    - infrastructure: Logging, narration, events, registries
    - config: Default configuration, schemas and the configuration manager
    - cli: Command line entry point and output formatters

Architecture:
    The pattern modules never print. They narrate into the active
    transcript, and the application layer decides how to present it.
"""

from ._version import __version__

__author__ = "Pattern Catalog Maintainers"
__package_name__ = "pattern-catalog"

"""
Usage:
    >>> pattern-catalog list --format table
    >>> pattern-catalog run memento
    >>> pattern-catalog run flyweight --seed 7 --format yaml
"""

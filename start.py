"""Simple launcher for the interactive route optimizer.

Equivalent to the ``route-optimizer`` console script, for running from
a source checkout without installing the package.
"""

from __future__ import annotations

from route_optimizer.io.console import main

if __name__ == "__main__":
    main()

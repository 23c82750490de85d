"""Extension layer: plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are logged, never raised.
"""

from todoctl.plugins.manager import PluginManager

__all__ = ["PluginManager"]

"""Platform implementations for the sync pipeline.

This package contains self-contained platform modules that provide
source implementations for different asset locations (a local checkout,
a remote git repository).

Each platform module auto-registers itself with the SourceRegistry
when imported.
"""

# Platform modules are imported by SourceRegistry.discover_platforms()

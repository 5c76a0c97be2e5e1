"""
The `packaging` sub-package holds the steps of a packaging run.

This includes:
- Running the buildpack's pre-package hook.
- Resolving declared dependencies through the download cache.
- Deriving the versioned archive path and writing the .tgz itself.
"""

# ABOUTME: humctl-wrapper - Manage Humanitec applications from the command line
# ABOUTME: Main package for the Humanitec CLI wrapper

"""humctl-wrapper - Humanitec application management CLI."""

__version__ = "0.3.0"
__all__ = ["cli", "config", "errors", "models"]

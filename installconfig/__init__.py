"""installconfig - cluster install config generation and loading.

Composes ``install-config.yaml`` from resolved inputs plus a table of
defaults, or loads and validates a previously written one.
"""

try:
    from importlib.metadata import version

    __version__ = version("cluster-installconfig")
except Exception:
    __version__ = "0.0.0.dev0"

__all__ = ["__version__"]

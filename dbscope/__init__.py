"""dbscope: database introspection and pool metrics over HTTP."""

__version__ = "0.1.0"

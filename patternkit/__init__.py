"""Working examples of classic design patterns, one module per pattern."""

__version__ = "0.1.0"
"""hrportal - role, permission and scope policy engine for the HR portal."""

__version__ = "0.1.0"

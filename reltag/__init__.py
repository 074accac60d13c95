"""Release version tagging for Ant-built packages."""

__version__ = "0.1.0"

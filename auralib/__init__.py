"""Building blocks for applications: credential stores, logging, notifications, processes, networking and localization."""

__version__ = "0.1.0"
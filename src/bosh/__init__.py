# src/bosh/__init__.py

"""Line-oriented personal task tracker."""

__version__ = "0.1.0"

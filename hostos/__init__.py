"""Host operating system profiles: naming conventions and executable lookup."""

__version__ = "0.1.0"

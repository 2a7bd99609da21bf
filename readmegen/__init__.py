"""Generate a README for Node.js and Angular projects from their manifest and sources."""

from .orchestrator import Orchestrator

__version__ = "0.1.0"

__all__ = ["Orchestrator", "__version__"]

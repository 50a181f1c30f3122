"""Core functionality for cps."""

from cps.core.git_detector import GitDetector
from cps.core.scanner import ProjectScanner, ScanOptions

__all__ = ["GitDetector", "ProjectScanner", "ScanOptions"]

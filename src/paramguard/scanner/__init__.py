"""Scanner orchestration package."""

from .discovery import discover_config_files
from .orchestrator import build_engine, scan_file, scan_paths, scan_tree

__all__ = ["build_engine", "discover_config_files", "scan_file", "scan_paths", "scan_tree"]

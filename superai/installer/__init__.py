"""Installer layer - stack detection, bundle copying and install-state tracking."""

from superai.installer.bundle import DEFAULT_COPY_STEPS, DESTINATION_DIRS, BundleCopier
from superai.installer.git_operations import GitOperations
from superai.installer.installer import Installer
from superai.installer.state import StateStore
from superai.installer.tech_stack_detector import TechStack, TechStackDetector
from superai.installer.updater import Updater

__all__ = [
    # Orchestration
    "Installer",
    "Updater",
    # Components
    "BundleCopier",
    "DEFAULT_COPY_STEPS",
    "DESTINATION_DIRS",
    "GitOperations",
    "StateStore",
    # Tech stack detection
    "TechStack",
    "TechStackDetector",
]

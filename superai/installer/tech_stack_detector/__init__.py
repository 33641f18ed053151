"""Tech stack detector module for identifying project technologies."""

from superai.installer.tech_stack_detector.detector import (
    TechStack,
    TechStackDetector,
)

__all__ = [
    "TechStack",
    "TechStackDetector",
]

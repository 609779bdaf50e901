# ABOUTME: One extractor per target domain
# ABOUTME: Each maps known substructures of its source documents onto IntelligenceEntry records

from .accessibility import AccessibilityExtractor
from .color_system import ColorSystemExtractor
from .components import ComponentsExtractor
from .design_tokens import DesignTokensExtractor
from .spacing import SpacingExtractor
from .storybook import StorybookExtractor
from .typography import TypographyExtractor
from .ux_patterns import UxPatternsExtractor

__all__ = [
    "AccessibilityExtractor",
    "ColorSystemExtractor",
    "ComponentsExtractor",
    "DesignTokensExtractor",
    "SpacingExtractor",
    "StorybookExtractor",
    "TypographyExtractor",
    "UxPatternsExtractor",
]

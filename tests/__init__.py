"""
Tests for Void Artillery FX
==========================

Run all tests:
    pytest tests/
"""

# Suppress pygame's pkg_resources deprecation warning (pygame issue #4557)
import warnings
warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")


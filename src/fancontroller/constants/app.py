"""
Constants for application metadata.
"""

from typing import Final

class AppConstants:
    """Defines application metadata and the organization used for per-user data."""
    APP_NAME: Final[str] = "FanController"
    VERSION: Final[str] = "1.0.0"
    ORGANIZATION_NAME: Final[str] = "FanController"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the constants to ensure they meet constraints."""
        if not self.APP_NAME:
            raise ValueError("APP_NAME must not be empty")
        if not self.VERSION:
            raise ValueError("VERSION must not be empty")
        if not self.ORGANIZATION_NAME:
            raise ValueError("ORGANIZATION_NAME must not be empty")

# Singleton instance for easy access
app = AppConstants()

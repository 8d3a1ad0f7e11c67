"""UI settings repository."""

from ..database import JsonDatabase
from ..models.settings import UISettings, UISettingsUpdate


class SettingsRepository:
    """Repository for the settings file."""

    @staticmethod
    async def get() -> UISettings:
        """Current settings, defaults when none are saved."""
        return await JsonDatabase.read_settings()

    @staticmethod
    async def update(data: UISettingsUpdate) -> UISettings:
        """Merge the provided settings and save them."""
        updates = data.model_dump(exclude_unset=True, exclude_none=True)
        return await JsonDatabase.update_settings(updates)

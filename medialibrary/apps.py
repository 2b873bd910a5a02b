import logging
from typing import Any

from django.apps import AppConfig
from django.core.signals import setting_changed


class MediaLibraryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'medialibrary'
    verbose_name = 'Media library'

    def ready(self) -> None:
        super().ready()
        setting_changed.connect(self._on_setting_changed, dispatch_uid='medialibrary.forget_extensions')

    def _on_setting_changed(self, sender: Any, setting: str, **kwargs: Any) -> None:
        from . import definitions
        from .extensions import forget_extensions

        if setting in {definitions.setting_name(key) for key in definitions.DEFAULTS}:
            logging.getLogger(__name__).debug("%s changed; reloading media library extensions.", setting)
            forget_extensions()

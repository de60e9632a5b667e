from django.apps import AppConfig


class SitesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.sites"

    def ready(self) -> None:
        from shared.application.message_bus import message_bus

        from .application import command_handlers

        command_handlers.register(message_bus)

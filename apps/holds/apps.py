from django.apps import AppConfig


class HoldsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.holds"

    def ready(self) -> None:
        from shared.application.message_bus import message_bus

        from .application import command_handlers

        command_handlers.register(message_bus)

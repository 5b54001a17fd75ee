"""Translation strings for English and Spanish."""

from typing import Dict

# Type alias for translation dictionaries
TranslationDict = Dict[str, str]

TRANSLATIONS: Dict[str, TranslationDict] = {
    "en": {
        # =============================================================================
        # Request status labels
        # =============================================================================
        "status.Pending": "Pending",
        "status.Approved": "Approved",
        "status.Rejected": "Rejected",

        # =============================================================================
        # Errors surfaced in the message slot
        # =============================================================================
        "error.invalid_range": "Please select a valid date range with working days.",
        "error.no_business_days": (
            "The selected dates contain no available working days "
            "(they may be holidays, weekends, or the range is not valid)."
        ),
        "error.insufficient_balance": "Request exceeds the remaining days ({remaining}).",
        "error.invalid_holiday": "The holiday date is not valid. Use YYYY-MM-DD.",
        "error.not_cancellable": "Only pending requests can be cancelled.",
        "error.not_authenticated": "Not signed in yet. Please wait and try again.",
        "error.save_request": "Error saving the request. Please try again.",
        "error.cancel_request": "Error cancelling the request. Please try again.",
        "error.save_settings": "Error saving the annual days setting. Please try again.",
        "error.save_holiday": "Error saving the holiday. Please try again.",
        "error.delete_holiday": "Error deleting the holiday. Please try again.",
        "error.import_holidays": "Error importing public holidays. Please try again.",

        # =============================================================================
        # Dashboard
        # =============================================================================
        "dashboard.title": "Vacation Manager",
        "dashboard.remaining": "Remaining Days",
        "dashboard.approved": "Approved Days",
        "dashboard.pending": "Pending Days",
        "dashboard.calculated": "{days} working days",
        "dashboard.insufficient": "You do not have enough days available ({remaining} remaining).",
        "dashboard.requests": "My Requests",
        "dashboard.no_requests": "You have no vacation requests yet.",
        "dashboard.requested_on": "Requested on {date}",

        # =============================================================================
        # Configuration
        # =============================================================================
        "config.title": "Configuration",
        "config.annual_days": "Assigned Vacation Days",
        "config.holidays": "Current Holidays ({count})",
        "config.no_holidays": "No holidays configured.",
        "config.saving": "Saving...",

        # =============================================================================
        # Console / CLI messages
        # =============================================================================
        "cli.loading": "Loading...",
        "cli.request_submitted": "Requested {days} working days from {start} to {end}.",
        "cli.request_cancelled": "Request {request_id} cancelled.",
        "cli.settings_saved": "Annual allotment set to {days} days.",
        "cli.holiday_added": "Holiday '{name}' added on {date}.",
        "cli.holiday_deleted": "Holiday on {date} deleted.",
        "cli.holiday_missing_fields": "Both a holiday name and a date are required.",
        "cli.holidays_imported": "Imported {count} public holidays for {country} {year}.",
        "cli.exported": "Exported to {path}",
        "cli.business_days": "{days} working days between {start} and {end}.",
        "cli.range_empty": "Enter both a start and an end date.",
    },
    "es": {
        # =============================================================================
        # Etiquetas de estado
        # =============================================================================
        "status.Pending": "Pendiente",
        "status.Approved": "Aprobada",
        "status.Rejected": "Rechazada",

        # =============================================================================
        # Errores
        # =============================================================================
        "error.invalid_range": "Por favor, selecciona un rango de fechas válido con días laborables.",
        "error.no_business_days": (
            "Las fechas no contienen días laborables disponibles "
            "(podrían ser festivos, fines de semana, o el rango no es válido)."
        ),
        "error.insufficient_balance": "Solicitud excede los días restantes ({remaining}).",
        "error.invalid_holiday": "La fecha del festivo no es válida. Usa AAAA-MM-DD.",
        "error.not_cancellable": "Solo se pueden cancelar solicitudes pendientes.",
        "error.not_authenticated": "Todavía no has iniciado sesión. Espera e inténtalo de nuevo.",
        "error.save_request": "Error al guardar la solicitud. Inténtalo de nuevo.",
        "error.cancel_request": "Error al cancelar la solicitud. Inténtalo de nuevo.",
        "error.save_settings": "Error al guardar la configuración de días. Inténtalo de nuevo.",
        "error.save_holiday": "Error al guardar el día festivo. Inténtalo de nuevo.",
        "error.delete_holiday": "Error al eliminar el día festivo. Inténtalo de nuevo.",
        "error.import_holidays": "Error al importar los festivos oficiales. Inténtalo de nuevo.",

        # =============================================================================
        # Panel principal
        # =============================================================================
        "dashboard.title": "Gestor de Vacaciones",
        "dashboard.remaining": "Días Restantes",
        "dashboard.approved": "Días Aprobados",
        "dashboard.pending": "Días Pendientes",
        "dashboard.calculated": "{days} días laborables",
        "dashboard.insufficient": "No tienes suficientes días disponibles ({remaining} restantes).",
        "dashboard.requests": "Mis Solicitudes",
        "dashboard.no_requests": "Aún no tienes solicitudes de vacaciones.",
        "dashboard.requested_on": "Solicitado el {date}",

        # =============================================================================
        # Configuración
        # =============================================================================
        "config.title": "Configuración",
        "config.annual_days": "Días de Vacaciones Asignados",
        "config.holidays": "Festivos Actuales ({count})",
        "config.no_holidays": "No hay festivos configurados.",
        "config.saving": "Guardando...",

        # =============================================================================
        # Consola / CLI
        # =============================================================================
        "cli.loading": "Cargando...",
        "cli.request_submitted": "Solicitados {days} días laborables del {start} al {end}.",
        "cli.request_cancelled": "Solicitud {request_id} cancelada.",
        "cli.settings_saved": "Días anuales establecidos en {days}.",
        "cli.holiday_added": "Festivo '{name}' añadido el {date}.",
        "cli.holiday_deleted": "Festivo del {date} eliminado.",
        "cli.holiday_missing_fields": "Se necesitan un nombre y una fecha para el festivo.",
        "cli.holidays_imported": "Importados {count} festivos oficiales de {country} {year}.",
        "cli.exported": "Exportado a {path}",
        "cli.business_days": "{days} días laborables entre {start} y {end}.",
        "cli.range_empty": "Introduce una fecha de inicio y una de fin.",
    },
}


def get_translation(key: str, language: str = "en", **kwargs) -> str:
    """Get a translated string.

    Falls back to English, then to the key itself when no translation exists.

    Args:
        key: The translation key.
        language: Language code ('en' or 'es').
        **kwargs: Format arguments for the translation string.

    Returns:
        The translated and formatted string.
    """
    table = TRANSLATIONS.get(language, TRANSLATIONS["en"])
    template = table.get(key) or TRANSLATIONS["en"].get(key, key)
    if kwargs:
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError):
            return template
    return template

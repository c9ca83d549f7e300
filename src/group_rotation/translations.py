"""Translation support for the command-line output."""

# Current language
_current_language = "en"

# Translation dictionaries
_translations = {
    "de": {
        # Schedule output
        "Round": "Runde",
        "Group": "Gruppe",
        "Score": "Bewertung",
        "Restarts": "Neustarts",
        "failed": "fehlgeschlagen",
        "Best restart": "Bester Neustart",
        "Deadline reached, showing best schedule so far":
            "Zeitlimit erreicht, bester bisheriger Plan wird angezeigt",

        # Pairing summary
        "Pairing summary": "Paarungsübersicht",
        "Most frequent pair": "Häufigstes Paar",
        "Least frequent pair": "Seltenstes Paar",
        "Imbalance": "Ungleichgewicht",
        "Repeated pairs": "Wiederholte Paare",
        "Pairs never grouped": "Nie gruppierte Paare",

        # Errors
        "No participants given": "Keine Teilnehmenden angegeben",
        "No feasible schedule found": "Kein gültiger Plan gefunden",
        "Invalid configuration": "Ungültige Konfiguration",
    }
}


def set_language(lang: str):
    """Set the current language."""
    global _current_language
    _current_language = lang


def tr(text: str) -> str:
    """Translate a string to the current language."""
    if _current_language == "en":
        return text

    translations = _translations.get(_current_language, {})
    return translations.get(text, text)


def available_languages() -> list[tuple[str, str]]:
    """Get list of available languages as (code, name) tuples."""
    return [
        ("en", "English"),
        ("de", "Deutsch"),
    ]

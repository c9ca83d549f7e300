import sys
import os
from src.group_rotation.runner import run
from src.group_rotation.translations import set_language


def get_system_language() -> str:
    """Detect system language from environment."""
    # Check common locale environment variables
    for var in ('LC_ALL', 'LC_MESSAGES', 'LANG', 'LANGUAGE'):
        value = os.environ.get(var, '')
        if value.startswith('de'):
            return 'de'
    return 'en'


def main():
    # Auto-detect language from environment; --lang on the command line wins
    lang = os.environ.get("GROUP_ROTATION_LANG")
    if not lang:
        lang = get_system_language()
    set_language(lang)

    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()

"""Access to the SASSDOC_* Django settings, with defaults."""

from django.conf import settings

DEFAULTS = {
    "SASSDOC_TITLE_PREFIX": "Sass: ",
    "SASSDOC_DEFAULT_TITLE": "Syntactically Awesome Style Sheets",
    "SASSDOC_NAV": [],
    "SASSDOC_VERSIONS": {},
    "SASSDOC_RELEASE_REPOS": {
        "dart": "dart-sass",
        "libsass": "libsass",
        "ruby": "sass",
    },
    "SASSDOC_VALUE_TYPE_LINKS": {
        "number": "/documentation/values/numbers",
        "string": "/documentation/values/strings",
        "quoted string": "/documentation/values/strings#quoted",
        "unquoted string": "/documentation/values/strings#unquoted",
        "color": "/documentation/values/colors",
        "list": "/documentation/values/lists",
        "map": "/documentation/values/maps",
        "boolean": "/documentation/values/booleans",
        "null": "/documentation/values/null",
        "function": "/documentation/values/functions",
        "selector": "/documentation/functions/selector#selector-values",
    },
    "SASSDOC_AUTOGEN_CSS": True,
}


def get_setting(name):
    """Return ``settings.<name>``, falling back to the app default."""
    return getattr(settings, name, DEFAULTS[name])

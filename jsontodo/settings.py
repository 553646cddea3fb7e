from typing import Dict, Any, Mapping
import importlib
import copy
import os

DEFAULTS: "Dict[str, Any]" = {
    "PORT": 5000,
    "HOST": "0.0.0.0",
    "DB_PATH": os.path.join(os.path.dirname(os.path.abspath(__file__)), "db.json"),
    "BACKEND": "json_file",
    "STRICT_STORAGE": False,
    "WRITE_LOCK_CLASS": "jsontodo.core.utils.FileWriteLock",
    "ID_GENERATOR_CLASS": "jsontodo.core.ids.TimestampIdGenerator",
    "LOCK_TIMEOUT": -1.0,
    "LOG_LEVEL": "INFO",
}

IMPORT_STRINGS = [
    "WRITE_LOCK_CLASS",
    "ID_GENERATOR_CLASS",
]

# Settings read from an environment variable that doesn't carry the namespace prefix.
UNPREFIXED = {"PORT": "PORT"}

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def import_string(dotted_path):
    """
    Import a dotted module path and return the attribute/class designated by the
    last name in the path. Raise ImportError if the import failed.
    """
    try:
        module_path, class_name = dotted_path.rsplit(".", 1)
    except ValueError as err:
        raise ImportError("%s doesn't look like a module path" % dotted_path) from err

    module = importlib.import_module(module_path)
    try:
        return getattr(module, class_name)
    except AttributeError as err:
        raise ImportError(
            'Module "%s" does not define a "%s" attribute/class'
            % (module_path, class_name)
        ) from err


def perform_import(val, setting_name):
    """
    If the given setting is a string import notation,
    then perform the necessary import or imports.
    """
    if val is None:
        return None
    elif isinstance(val, str):
        return import_from_string(val, setting_name)
    elif isinstance(val, (list, tuple)):
        return [import_from_string(item, setting_name) for item in val]
    return val


def import_from_string(val, setting_name):
    """
    Attempt to import a class from a string representation.
    """
    try:
        return import_string(val)
    except ImportError as e:
        msg = "Could not import '%s' for setting '%s'. %s: %s." % (
            val,
            setting_name,
            e.__class__.__name__,
            e,
        )
        raise ImportError(msg)


def coerce(value: "Any", default: "Any", setting_name: "str") -> "Any":
    """Converts a value read from the environment to the type of the setting's default."""
    if not isinstance(value, str) or isinstance(default, str) or default is None:
        return value

    if isinstance(default, bool):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise ValueError("Invalid boolean for setting '%s': %r" % (setting_name, value))

    try:
        return type(default)(value)
    except ValueError:
        raise ValueError(
            "Invalid value for setting '%s': %r (expected %s)"
            % (setting_name, value, type(default).__name__)
        )


class TodoSettings:
    """
    A settings object that allows the service settings to be accessed as
    properties. For example:

        from jsontodo.settings import todo_settings
        print(todo_settings.DB_PATH)

    Values are looked up in ``user_settings`` (the environment by default) under the
    namespace prefix, so DB_PATH is read from TODO_DB_PATH. PORT is read from PORT.
    """

    def __init__(
        self,
        defaults=DEFAULTS,
        import_strings=IMPORT_STRINGS,
        user_settings: "Mapping[str, str]" = os.environ,
        namespace="TODO",
    ):
        self.defaults = defaults
        self.import_strings = import_strings
        self.namespace = namespace
        self._user_settings = user_settings
        self._cached_attrs = set()

    def _lookup(self, attr: "str") -> "Any":
        env_name = UNPREFIXED.get(attr, "%s_%s" % (self.namespace, attr))
        return self._user_settings[env_name]

    def __getattr__(self, attr):
        if attr.startswith("_") or attr not in self.defaults:
            raise AttributeError("Invalid setting: '%s'" % attr)

        default = self.defaults[attr]
        try:
            val = coerce(self._lookup(attr), default, attr)
        except KeyError:
            val = copy.deepcopy(default)

        # Coerce import strings into classes
        if attr in self.import_strings:
            val = perform_import(val, attr)

        # Cache the result
        self._cached_attrs.add(attr)
        setattr(self, attr, val)
        return val

    def reload(self):
        for attr in self._cached_attrs:
            delattr(self, attr)
        self._cached_attrs.clear()


todo_settings = TodoSettings()

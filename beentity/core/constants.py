# Field name convention
SETTER_PREFIX = "set_"
GETTER_PREFIX = "get_"

# Text forms accepted when comparing table values against booleans
TRUTHY_WORDS = frozenset({"true", "yes", "y", "1", "on"})
FALSY_WORDS = frozenset({"false", "no", "n", "0", "off"})

# Text forms matching a None value
NULL_WORDS = frozenset({"", "null", "none"})

# Suffix tried when resolving a type name by naming convention
FACTORY_CLASS_SUFFIX = "Factory"

DEFAULT_DATABASE_URL = "sqlite:///:memory:"
DEFAULT_LOG_LEVEL = "INFO"

"""
Global constants used throughout the project
"""
from connectivity.types import Variant


DEFAULT_VARIANT = Variant.WEIGHTED

LOG_FORMAT = "%(levelname)s | %(message)s"

COMPONENT_SEPARATOR = " "

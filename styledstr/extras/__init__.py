"""Extra utilities. Not required for core functionality."""

from ._serialization import from_yaml as from_yaml
from ._serialization import to_yaml as to_yaml

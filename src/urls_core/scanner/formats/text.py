"""Line-oriented scanners for data and configuration formats."""
from __future__ import annotations

from ...models import FileFormat
from ..registry import LineScanner
from ..suppression import HASH_LINE_COMMENTS, PROPERTIES_COMMENTS


class JsonScanner(LineScanner):
    name = "json"
    formats = (FileFormat.JSON,)


class YamlScanner(LineScanner):
    name = "yaml"
    formats = (FileFormat.YAML, FileFormat.YML)
    comments = HASH_LINE_COMMENTS


class PropertiesScanner(LineScanner):
    """Java ``.properties`` files; ``#`` and ``!`` start comment lines."""

    name = "properties"
    formats = (FileFormat.PROPERTIES,)
    comments = PROPERTIES_COMMENTS


__all__ = ["JsonScanner", "YamlScanner", "PropertiesScanner"]

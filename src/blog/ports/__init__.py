from .content_source import ContentSource
from .logger import BuildLogger
from .resources import ResourceSource
from .string_table import StringTableSource

__all__ = [
    "BuildLogger",
    "ContentSource",
    "ResourceSource",
    "StringTableSource",
]

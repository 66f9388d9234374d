"""Common literal values used across wagjo_blog.

These constants keep lookup suffixes and plugin names centralized so the
validation, generator handoff, CLI, and tests import the same values.

Examples
--------
>>> from wagjo_blog import _constants
>>> _constants.CONTENT_SUFFIXES[0]
'.adoc'
>>> _constants.GENERATOR_ENTRY_POINT_GROUP
'wagjo_blog.generators'
"""

CONTENT_SUFFIXES = (".adoc", ".asciidoc", ".md", ".markdown", ".html")
GENERATOR_ENTRY_POINT_GROUP = "wagjo_blog.generators"

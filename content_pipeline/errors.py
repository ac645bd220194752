"""
errors.py
---------
Exception hierarchy for the content pipeline.

    Exception (built-in)
    └── ContentError - Base for every pipeline failure
        ├── FrontMatterError - Missing or malformed '---' delimiters
        ├── MetadataError - Front matter schema violations and bad dates
        ├── TemplateError - Unreadable template or unknown placeholder
        ├── OutputError - Page or manifest write failures
        ├── AssetError - Image directory copy failures
        └── BuildError - One or more files of a content type failed

Usage:
    from content_pipeline.errors import ContentError

    try:
        build_site(content_types)
    except ContentError as e:
        LOG.error("%s", e)
"""


class ContentError(Exception):
    """Base class for all content pipeline errors."""


class FrontMatterError(ContentError):
    """
    Raised when a document does not open with a '---' line or never
    closes its metadata block.

    Examples:
        >>> raise FrontMatterError("missing opening '---' delimiter")
    """


class MetadataError(ContentError):
    """
    Raised when the metadata block does not decode into a valid record:
    - YAML syntax errors
    - Missing title, date or tags
    - Wrong value types
    - Dates that are not YYYY-MM-DD calendar dates

    Examples:
        >>> raise MetadataError("missing required field: 'tags'")
        >>> raise MetadataError("invalid date '2024-02-30': expected YYYY-MM-DD")
    """


class TemplateError(ContentError):
    """Raised when the page template cannot be loaded or filled."""


class OutputError(ContentError):
    """Raised when a page or manifest file cannot be written."""


class AssetError(ContentError):
    """Raised when an image directory cannot be copied."""


class BuildError(ContentError):
    """
    Raised when at least one file of a content type failed.

    Individual failures are logged as they happen; this error only carries
    the summary so that no manifest is written for a partial set.
    """

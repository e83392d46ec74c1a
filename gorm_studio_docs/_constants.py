"""Common literal values used across gorm_studio_docs.

These constants keep link prefixes, labels, and filenames centralized so the
index, the manifest writer, and tests derive identical values. Intended for
internal use within the gorm_studio_docs package.

Examples
--------
>>> from gorm_studio_docs import _constants
>>> _constants.DOCS_HREF_PREFIX + "configuration/basic"
'/docs/configuration/basic'
>>> _constants.MANIFEST_FILENAME
'navigation.json'
"""

DOCS_HREF_PREFIX = "/docs/"
ROOT_BREADCRUMB_TITLE = "Docs"
MANIFEST_FILENAME = "navigation.json"

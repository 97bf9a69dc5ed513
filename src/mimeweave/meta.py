"""Distribution metadata for mimeweave."""

__app_name__ = "mimeweave"
__version__ = "0.3.0"
__author__ = "Mimeweave Developers"
__email__ = "dev@mimeweave.invalid"
__url__ = "https://github.com/mimeweave/mimeweave"
__description__ = "Chainable MIME email builder rendering multipart/mixed messages to bytes"
__license_type__ = "MIT"

__all__ = [
    "__app_name__",
    "__author__",
    "__description__",
    "__email__",
    "__license_type__",
    "__url__",
    "__version__",
]

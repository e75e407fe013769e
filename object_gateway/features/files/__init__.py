"""Files feature.

Upload, list and delete objects in the configured bucket.
"""

from .router import router

__all__ = ["router"]

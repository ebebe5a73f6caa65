from wirekit.lock_mode import LockMode
from wirekit.metadata import AnnotationMetadataProvider

DEFAULT_LOCK_MODE = LockMode.NONE

DEFAULT_METADATA_PROVIDER = AnnotationMetadataProvider()
"""Process-wide provider reading ``@injectable``/``@autowired`` annotations."""

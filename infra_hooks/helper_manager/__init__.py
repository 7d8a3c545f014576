from .helper_manager import helper_manager
from .lazy_helper import LazyHelper
from .discover_helpers import discover_helpers

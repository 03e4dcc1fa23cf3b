from .fix import handle_fix
from .catalogue import handle_list, handle_classify

__all__ = [
  "handle_classify",
  "handle_fix",
  "handle_list",
]

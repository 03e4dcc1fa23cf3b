"""
CLI Command Handlers Facade.

Re-exports the handlers from `lodash_switcheroo.cli.handlers` so that the
dispatcher (and tests patching collaborators) have a single import point.
"""

from lodash_switcheroo.cli.handlers.fix import handle_fix
from lodash_switcheroo.cli.handlers.catalogue import handle_classify, handle_list

__all__ = [
  "handle_classify",
  "handle_fix",
  "handle_list",
]

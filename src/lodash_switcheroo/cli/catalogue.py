"""
Catalogue Table rendering logic.

Lists the native alternative of every lodash function known to the
`SemanticsManager`, either as a Rich table (CLI) or as structured rows.
"""

from typing import Dict, List, Optional

from rich.markup import escape
from rich.table import Table

from lodash_switcheroo.core.hooks import list_hooks
from lodash_switcheroo.enums import FunctionCategory, SafetyLevel
from lodash_switcheroo.semantics.manager import SemanticsManager
from lodash_switcheroo.semantics.schema import NativeAlternative
from lodash_switcheroo.utils.console import console

_SAFETY_STYLES = {
  SafetyLevel.SAFE: "green",
  SafetyLevel.CAUTION: "yellow",
  SafetyLevel.UNSAFE: "red",
}


class CatalogueTable:
  """
  Logic for generating the catalogue listing.
  """

  def __init__(self, semantics: SemanticsManager):
    """
    Args:
        semantics (SemanticsManager): The loaded catalogue.
    """
    self.semantics = semantics

  def get_json(self, category: Optional[FunctionCategory] = None) -> List[Dict[str, str]]:
    """
    Returns the listing as structured data.

    Each row contains 'function', 'category', 'native', 'safety' and
    'rewrite' (the status icon, see `_get_status_icon`).
    """
    specialized = set(list_hooks())
    rows = []
    for name, alternative in self.semantics.list_alternatives(category).items():
      rows.append(
        {
          "function": name,
          "category": alternative.category.value if alternative.category else "",
          "native": alternative.native,
          "safety": alternative.safety.level.value,
          "rewrite": self._get_status_icon(alternative, name in specialized),
        }
      )
    return rows

  def render(self, category: Optional[FunctionCategory] = None) -> None:
    """Prints the listing as a table to the active console."""
    title = "lodash-switcheroo Native Alternatives"
    if category is not None:
      title += f" ({FunctionCategory(category).value})"
    table = Table(title=title)

    table.add_column("Function", style="cyan", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Native")
    table.add_column("Safety")
    table.add_column("Rewrite", justify="center")

    for row in self.get_json(category):
      style = _SAFETY_STYLES[SafetyLevel(row["safety"])]
      table.add_row(
        row["function"],
        row["category"],
        escape(row["native"]),
        f"[{style}]{row['safety']}[/{style}]",
        row["rewrite"],
      )

    console.print(table)

  @staticmethod
  def _get_status_icon(alternative: NativeAlternative, specialized: bool) -> str:
    """
    Returns:
        str: '⛔' opt-in only (exclude_by_default), '🧩' specialized handler,
        '✅' generic strategy.
    """
    if alternative.exclude_by_default:
      return "⛔"
    if specialized:
      return "🧩"
    return "✅"

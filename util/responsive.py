from dataclasses import dataclass
from typing import Dict, List


@dataclass
class ColumnLayout:
    """Responsive result table layout definition."""
    min_width: int
    columns: List[str]
    id_w: int = 5
    prio_w: int = 3
    stat_w: int = 2
    title_min: int = 16
    category_w: int = 12
    score_w: int = 4

    def has_column(self, name: str) -> bool:
        return name in self.columns

    def _base_widths(self) -> Dict[str, int]:
        base = {
            'id': self.id_w,
            'prio': self.prio_w,
            'stat': self.stat_w,
            'title': self.title_min,
            'category': self.category_w,
            'score': self.score_w,
        }
        return {col: max(1, base.get(col, 8)) for col in self.columns}

    def required_width(self) -> int:
        return sum(self._base_widths().values()) + len(self.columns) - 1

    def calculate_widths(self, term_width: int) -> Dict[str, int]:
        """Compute column widths that fit into the terminal; title absorbs the slack."""
        separators = max(0, len(self.columns) - 1)
        widths = self._base_widths()
        slack = term_width - separators - sum(widths.values())
        if slack >= 0:
            widths['title'] += slack
            return widths
        overflow = -slack
        for col in ('category', 'title'):
            if col not in widths:
                continue
            reducible = max(0, widths[col] - 4)
            take = min(reducible, overflow)
            widths[col] -= take
            overflow -= take
            if overflow == 0:
                break
        return widths


class ResponsiveLayoutManager:
    """Responsive layout selector for the result table."""

    LAYOUTS = [
        ColumnLayout(min_width=100, columns=['id', 'prio', 'stat', 'title', 'category', 'score'], category_w=16, title_min=24),
        ColumnLayout(min_width=72, columns=['id', 'prio', 'stat', 'title', 'category'], title_min=20),
        ColumnLayout(min_width=48, columns=['id', 'prio', 'stat', 'title'], title_min=16),
        ColumnLayout(min_width=0, columns=['id', 'prio', 'title'], id_w=4, title_min=8),
    ]

    @classmethod
    def select_layout(cls, term_width: int, show_scores: bool = False) -> ColumnLayout:
        for layout in cls.LAYOUTS:
            if layout.has_column('score') and not show_scores:
                continue
            effective_min = max(layout.min_width, layout.required_width())
            if term_width >= effective_min:
                return layout
        return cls.LAYOUTS[-1]

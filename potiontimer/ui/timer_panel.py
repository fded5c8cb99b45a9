"""Timer panel: everything inside the main window.

Layout (top → bottom):
    - Heading
    - Potion checkboxes (builder 10x, research 24x)
    - Category radio buttons (builder / research)
    - Duration input + Add button
    - Timer list, one row per timer with a remove button
    - Reset Timers button
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit, QCheckBox, QRadioButton,
    QButtonGroup, QListWidget, QListWidgetItem,
)

from ..timer.registry import (
    TimerRegistry, TimerView, Category,
    BUILDER_POTION_MULTIPLIER, RESEARCH_POTION_MULTIPLIER,
)
from .styles import CATEGORY_COLORS


INPUT_PLACEHOLDER = "1h30m20s / 1w2d3h"

POTION_LABELS: dict[Category, str] = {
    Category.BUILDER:  f"Use Builder Potion ({BUILDER_POTION_MULTIPLIER}x speed)",
    Category.RESEARCH: f"Use Research Potion ({RESEARCH_POTION_MULTIPLIER}x speed)",
}

CATEGORY_LABELS: dict[Category, str] = {
    Category.BUILDER:  "Builder Timer",
    Category.RESEARCH: "Research Timer",
}


class TimerRow(QWidget):
    """A single list row: label text plus a red remove button."""

    def __init__(self, view: TimerView, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.timer_id = view.id

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 2, 4, 2)
        layout.setSpacing(6)

        self.label = QLabel(view.label, self)
        self.label.setStyleSheet(
            f"background: transparent; color: {CATEGORY_COLORS[view.category]};"
        )
        layout.addWidget(self.label, 1)

        self.remove_btn = QPushButton("×", self)
        self.remove_btn.setObjectName("removeButton")
        self.remove_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.remove_btn.setToolTip("Remove timer")
        layout.addWidget(self.remove_btn)


class TimerPanel(QWidget):
    """Controls and timer list, bound to one :class:`TimerRegistry`."""

    def __init__(
        self,
        registry: TimerRegistry,
        parent: QWidget | None = None,
        *,
        heading: str = "",
        default_category: Category = Category.BUILDER,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._rows: list[TimerRow] = []
        self._build_ui(heading, default_category)
        self._connect_signals()
        self._render(registry.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self, heading: str, default_category: Category) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(8)

        self._heading = QLabel(heading, self)
        self._heading.setObjectName("heading")
        self._heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._heading)

        # ── potion toggles ───────────────────────────────────────────
        self._potion_boxes: dict[Category, QCheckBox] = {}
        for category in Category:
            box = QCheckBox(POTION_LABELS[category], self)
            box.setChecked(self._registry.multiplier_enabled(category))
            self._potion_boxes[category] = box
            layout.addWidget(box, 0, Qt.AlignmentFlag.AlignHCenter)

        layout.addSpacing(8)

        # ── category radios ──────────────────────────────────────────
        self._category_group = QButtonGroup(self)
        self._category_radios: dict[Category, QRadioButton] = {}
        for category in Category:
            radio = QRadioButton(CATEGORY_LABELS[category], self)
            radio.setChecked(category is default_category)
            self._category_group.addButton(radio)
            self._category_radios[category] = radio
            layout.addWidget(radio, 0, Qt.AlignmentFlag.AlignHCenter)

        layout.addSpacing(8)

        # ── input row ────────────────────────────────────────────────
        input_row = QHBoxLayout()
        input_row.setSpacing(10)
        input_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        input_row.addWidget(QLabel("Time Input:", self))
        self._input = QLineEdit(self)
        self._input.setPlaceholderText(INPUT_PLACEHOLDER)
        input_row.addWidget(self._input)

        self._add_btn = QPushButton("Add", self)
        self._add_btn.setObjectName("primaryButton")
        input_row.addWidget(self._add_btn)
        layout.addLayout(input_row)

        # ── timer list ───────────────────────────────────────────────
        title = QLabel("Timers", self)
        title.setObjectName("subheading")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self._list = QListWidget(self)
        layout.addWidget(self._list, 1)

        self._reset_btn = QPushButton("Reset Timers", self)
        layout.addWidget(self._reset_btn, 0, Qt.AlignmentFlag.AlignHCenter)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        for category, box in self._potion_boxes.items():
            box.toggled.connect(
                lambda checked, c=category: self._registry.set_multiplier_enabled(c, checked)
            )
        self._add_btn.clicked.connect(self._on_add)
        self._input.returnPressed.connect(self._on_add)
        self._reset_btn.clicked.connect(self._registry.clear_all)

        self._registry.timers_changed.connect(self._render)

    # ── public ────────────────────────────────────────────────────────────

    @property
    def selected_category(self) -> Category:
        for category, radio in self._category_radios.items():
            if radio.isChecked():
                return category
        return Category.BUILDER

    def set_selected_category(self, category: Category) -> None:
        self._category_radios[category].setChecked(True)

    @property
    def rows(self) -> list[TimerRow]:
        return list(self._rows)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_add(self) -> None:
        created = self._registry.add_timer(self._input.text(), self.selected_category)
        if created is not None:
            self._input.clear()

    def _render(self, views: tuple[TimerView, ...]) -> None:
        """Rebuild the list from a registry snapshot."""
        self._list.clear()
        self._rows = []
        for view in views:
            row = TimerRow(view)
            row.remove_btn.clicked.connect(
                lambda _=False, timer_id=view.id: self._registry.remove_timer(timer_id)
            )
            item = QListWidgetItem(self._list)
            item.setSizeHint(row.sizeHint())
            self._list.setItemWidget(item, row)
            self._rows.append(row)

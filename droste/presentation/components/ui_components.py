# droste/presentation/components/ui_components.py
from PySide6.QtWidgets import (QPushButton, QLabel, QToolBar, QWidget, QSizePolicy,
                               QDoubleSpinBox, QSpinBox)
from PySide6.QtCore import Signal

from droste.domain.models.scene import EditorSettings


class StyledButton(QPushButton):
    """Custom styled button with standard appearance."""
    def __init__(self, text, parent=None):
        super().__init__(text, parent)
        self.setStyleSheet("""
            QPushButton {
                background-color: #3a7ca5;
                color: white;
                padding: 4px 12px;
                border-radius: 4px;
            }
            QPushButton:hover {
                background-color: #2a6b94;
            }
            QPushButton:pressed {
                background-color: #1a5a83;
            }
        """)


class SceneToolbar(QToolBar):
    """Toolbar with the scene counters, the interaction settings and a reset button."""

    reset_requested = Signal()
    min_drag_size_changed = Signal(float)
    max_hit_depth_changed = Signal(int)

    def __init__(self, parent=None):
        super().__init__("Scene", parent)
        self.setMovable(False)
        self.setFloatable(False)

        self.counts_label = QLabel()
        self.addWidget(self.counts_label)
        self.addSeparator()

        self.addWidget(QLabel("Min drag "))
        self.min_drag_spin = QDoubleSpinBox()
        self.min_drag_spin.setDecimals(3)
        self.min_drag_spin.setRange(0.001, 0.5)
        self.min_drag_spin.setSingleStep(0.005)
        # Only emit on commit or arrow clicks, not on every keystroke
        self.min_drag_spin.setKeyboardTracking(False)
        self.min_drag_spin.valueChanged.connect(self.min_drag_size_changed.emit)
        self.addWidget(self.min_drag_spin)

        self.addWidget(QLabel(" Hit depth "))
        self.hit_depth_spin = QSpinBox()
        self.hit_depth_spin.setRange(1, 1024)
        self.hit_depth_spin.setKeyboardTracking(False)
        self.hit_depth_spin.valueChanged.connect(self.max_hit_depth_changed.emit)
        self.addWidget(self.hit_depth_spin)

        # Push the button to the right
        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.addWidget(spacer)

        self.reset_button = StyledButton("Reset (Esc)")
        self.reset_button.clicked.connect(self.reset_requested.emit)
        self.addWidget(self.reset_button)

        self.set_counts(0, 0)

    def set_counts(self, screens: int, patterns: int) -> None:
        self.counts_label.setText(f"Screens: {screens}   Patterns: {patterns}")

    def show_settings(self, settings: EditorSettings) -> None:
        """Display settings without re-emitting them as user changes."""
        for spin, value in ((self.min_drag_spin, settings.min_drag_size),
                            (self.hit_depth_spin, settings.max_hit_depth)):
            spin.blockSignals(True)
            spin.setValue(value)
            spin.blockSignals(False)

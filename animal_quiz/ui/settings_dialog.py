"""Settings dialog for configuring Animal Quiz preferences."""

from __future__ import annotations

from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from animal_quiz.constants.quiz_constants import DEFAULT_FONT_SIZE, FONT_SIZE_RANGE
from animal_quiz.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        font_size: int = DEFAULT_FONT_SIZE,
        shuffle_seed: int | None = None,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)

        minimum, maximum = FONT_SIZE_RANGE
        self._font_size = max(minimum, min(maximum, font_size))
        self._shuffle_seed = shuffle_seed
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Font size:")
        font_label.setToolTip("Font size for questions, options and results")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(*FONT_SIZE_RANGE)
        self.font_spinbox.setValue(self._font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        display_layout.addLayout(font_row)

        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setToolTip("Use dark backgrounds with light text")
        self.dark_theme_checkbox.setChecked(self._theme == Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        shuffle_group = QGroupBox("Question Order")
        shuffle_layout = QVBoxLayout()
        shuffle_group.setLayout(shuffle_layout)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Shuffle seed:")
        seed_label.setToolTip("Leave blank for a different order on every run.")
        self.seed_edit = QLineEdit()
        self.seed_edit.setPlaceholderText("random")
        self.seed_edit.setValidator(QIntValidator(0, 2**31 - 1, self))
        if self._shuffle_seed is not None:
            self.seed_edit.setText(str(self._shuffle_seed))
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_edit)
        shuffle_layout.addLayout(seed_row)

        layout.addWidget(shuffle_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_font_size(self) -> int:
        """Get the selected font size."""
        return self.font_spinbox.value()

    def get_shuffle_seed(self) -> int | None:
        """Get the shuffle seed, or None when left blank."""
        raw_value = self.seed_edit.text().strip()
        return int(raw_value) if raw_value else None

    def get_theme(self) -> Theme:
        """Get the selected colour theme."""
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT

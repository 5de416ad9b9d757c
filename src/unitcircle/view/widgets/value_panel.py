"""
Value panel widget: the QLabel/QCheckBox side of the OutputSink interface.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QCheckBox, QFormLayout, QGroupBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from unitcircle import config
from unitcircle.view.surface import PanelField

ROW_LABELS = {
    PanelField.ANGLE_DEG: "Angle:",
    PanelField.ANGLE_RAD: "",
    PanelField.COORDS: "Point (cos, sin):",
    PanelField.SIN: "sin θ",
    PanelField.COS: "cos θ",
    PanelField.TAN: "tan θ",
    PanelField.COT: "cot θ",
    PanelField.SEC: "sec θ",
    PanelField.CSC: "csc θ",
}

VALUE_COLORS = {
    PanelField.SIN: config.SIN_COLOR,
    PanelField.COS: config.COS_COLOR,
    PanelField.TAN: config.TAN_COLOR,
    PanelField.COT: config.COT_COLOR,
    PanelField.SEC: config.SEC_COLOR,
    PanelField.CSC: config.CSC_COLOR,
}


class ValuePanelWidget(QWidget):
    """
    Text outputs for the angle, the point and the ratios, plus the DEG/RAD toggle.

    The toggle is exposed as `unit_toggle`; connect to its `toggled(bool)` signal.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        root = QVBoxLayout(self)

        # unit toggle row
        toggle_row = QHBoxLayout()
        self.unit_toggle = QCheckBox(self.tr("Radians"), self)
        toggle_row.addWidget(self.unit_toggle)
        toggle_row.addStretch()
        root.addLayout(toggle_row)

        # values
        box = QGroupBox(self.tr("Values"), self)
        self.form = QFormLayout(box)
        self.form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)
        root.addWidget(box)
        root.addStretch()

        self._labels: dict[PanelField, QLabel] = {}
        for panel_field, text in ROW_LABELS.items():
            value = QLabel("", box)
            value.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            color = VALUE_COLORS.get(panel_field)
            if color:
                value.setStyleSheet(f"color: {color}; font-weight: bold;")
            self.form.addRow(self.tr(text), value)
            self._labels[panel_field] = value

        # mode label sits next to the toggle
        self.mode_label = QLabel("", self)
        toggle_row.insertWidget(1, self.mode_label)
        self._labels[PanelField.MODE_TEXT] = self.mode_label

    # ---- OutputSink ----

    def write_text(self, field: PanelField, text: str) -> None:
        self._labels[field].setText(text)

    def set_emphasis(self, field: PanelField, active: bool) -> None:
        if active:
            style = f"font-weight: bold; color: {config.ACTIVE_TEXT_COLOR};"
        else:
            style = f"font-weight: normal; color: {config.INACTIVE_TEXT_COLOR};"
        self._labels[field].setStyleSheet(style)

    def set_visible(self, field: PanelField, visible: bool) -> None:
        label = self._labels[field]
        if field is PanelField.MODE_TEXT:
            label.setVisible(visible)
            return
        self.form.setRowVisible(label, visible)

    def read_toggle(self) -> bool:
        return self.unit_toggle.isChecked()

    def text_of(self, field: PanelField) -> str:
        return self._labels[field].text()

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from orbfill.chem.electron_configuration import summarize_configuration
from orbfill.chem.periodic_table import Element, PeriodicTable, table_position


# Tile colors by the block of the last filled orbital.
BLOCK_COLORS = {
    0: "#fca5a5",
    1: "#fde68a",
    2: "#93c5fd",
    3: "#c4b5fd",
}
UNKNOWN_COLOR = "#cbd5e1"


def _contrast_text(base: QtGui.QColor, light: QtGui.QColor, dark: QtGui.QColor) -> QtGui.QColor:
    luminance = (0.299 * base.red() + 0.587 * base.green() + 0.114 * base.blue()) / 255
    return dark if luminance > 0.65 else light


class ElementTileButton(QtWidgets.QAbstractButton):
    def __init__(self, element: Element, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.element = element
        self.setText(element.symbol)
        self.setToolTip(f"{element.name} ({element.localized_name})")
        self.setCheckable(True)
        self._border_color = QtGui.QColor("#cbd5e1")
        self._focus_color = QtGui.QColor("#0ea5e9")
        self._font_point_size = 10
        self.set_tile_color(self._block_color())
        self.setMinimumSize(38, 38)
        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding)

    def _block_color(self) -> str:
        config = self.element.electron_configuration
        if self.element.is_placeholder or not len(config):
            return UNKNOWN_COLOR
        return BLOCK_COLORS.get(config[-1].l, UNKNOWN_COLOR)

    def set_tile_color(self, base_hex: str) -> None:
        self._base_color = QtGui.QColor(base_hex)
        self._text_color = _contrast_text(self._base_color, QtGui.QColor("#f8fafc"), QtGui.QColor("#0f172a"))
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        if not painter.isActive():
            return
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        rect = self.rect().adjusted(1, 1, -1, -1)
        radius = 5

        painter.setPen(QtGui.QPen(self._border_color, 1))
        painter.setBrush(QtGui.QBrush(self._base_color))
        painter.drawRoundedRect(rect, radius, radius)

        if self.hasFocus() or self.isChecked():
            painter.setPen(QtGui.QPen(self._focus_color, 2))
            painter.drawRoundedRect(rect.adjusted(1, 1, -1, -1), radius, radius)

        font = painter.font()
        font.setBold(True)
        font.setPointSize(self._font_point_size + 2)
        painter.setFont(font)
        painter.setPen(QtGui.QPen(self._text_color))
        painter.drawText(rect, QtCore.Qt.AlignmentFlag.AlignCenter, self.element.symbol)

        small_font = painter.font()
        small_font.setBold(False)
        small_font.setPointSize(max(self._font_point_size - 2, 7))
        painter.setFont(small_font)
        painter.drawText(
            rect.adjusted(4, 2, -4, -2),
            QtCore.Qt.AlignmentFlag.AlignTop | QtCore.Qt.AlignmentFlag.AlignLeft,
            str(self.element.atomic_number),
        )
        painter.end()


class PeriodicTableGrid(QtWidgets.QWidget):
    element_selected = QtCore.Signal(object)

    def __init__(self, table: PeriodicTable, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.table = table
        self._group = QtWidgets.QButtonGroup(self)
        self._group.setExclusive(True)
        grid = QtWidgets.QGridLayout(self)
        grid.setSpacing(3)
        for element in table:
            position = table_position(element)
            if position is None:
                continue
            row, col = position
            tile = ElementTileButton(element, self)
            tile.clicked.connect(lambda _checked=False, e=element: self.element_selected.emit(e))
            self._group.addButton(tile)
            grid.addWidget(tile, row, col)
        # Spacer row between the main table and the f-block rows.
        grid.setRowMinimumHeight(7, 12)

    def select(self, atomic_number: int) -> None:
        for tile in self._group.buttons():
            if tile.element.atomic_number == atomic_number:
                tile.setChecked(True)
                self.element_selected.emit(tile.element)
                return


class OrbitalBoxView(QtWidgets.QWidget):
    """Orbital box diagram: one row per orbital in fill order, lowest at the bottom."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.element: Element | None = None
        self._colors = {
            "surface": QtGui.QColor("#ffffff"),
            "text": QtGui.QColor("#0f172a"),
            "border": QtGui.QColor("#cbd5e1"),
            "electron": QtGui.QColor("#3b82f6"),
            "filled": QtGui.QColor("#22c55e"),
            "vacancy": QtGui.QColor("#ef4444"),
        }
        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(320)

    def set_element(self, element: Element) -> None:
        self.element = element
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        if not painter.isActive():
            return
        try:
            painter.fillRect(self.rect(), self._colors["surface"])
            painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
            if self.element is None or not len(self.element.electron_configuration):
                return
            orbitals = self.element.electron_configuration.orbitals

            margin = 16.0
            left = 70.0
            box = max(14.0, min(28.0, (self.width() - left - margin) / 15.0))
            spacing = 4.0
            row_h = max(box + 4.0, min(60.0, (self.height() - 2 * margin) / len(orbitals)))
            base_y = self.height() - margin - row_h

            for idx, orbital in enumerate(orbitals):
                y = base_y - idx * row_h
                painter.setPen(QtGui.QPen(self._colors["text"], 2))
                painter.drawText(QtCore.QPointF(margin, y + box * 0.75), orbital.name)
                if orbital.is_full:
                    border = self._colors["filled"]
                elif orbital.is_empty:
                    border = self._colors["vacancy"]
                else:
                    border = self._colors["border"]
                for j, slot in enumerate(orbital):
                    rect = QtCore.QRectF(left + j * (box + spacing), y, box, box)
                    painter.setPen(QtGui.QPen(border, 2))
                    painter.setBrush(QtCore.Qt.NoBrush)
                    painter.drawRect(rect)
                    painter.setPen(QtGui.QPen(self._colors["electron"], 2))
                    if slot.up:
                        painter.drawText(rect.adjusted(2, 0, -box / 2, 0), QtCore.Qt.AlignmentFlag.AlignCenter, "↿")
                    if slot.down:
                        painter.drawText(rect.adjusted(box / 2, 0, -2, 0), QtCore.Qt.AlignmentFlag.AlignCenter, "⇂")
        finally:
            painter.end()


class ConfigurationPanel(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QtWidgets.QVBoxLayout(self)
        self.title_label = QtWidgets.QLabel()
        self.title_label.setStyleSheet("font-weight: bold; font-size: 16px;")
        self.notation_label = QtWidgets.QLabel()
        self.notation_label.setWordWrap(True)
        self.notation_label.setTextInteractionFlags(QtCore.Qt.TextInteractionFlag.TextSelectableByMouse)
        self.shorthand_label = QtWidgets.QLabel()
        self.details_label = QtWidgets.QLabel()
        self.details_label.setStyleSheet("color: #475569;")
        self.box_view = OrbitalBoxView(self)
        layout.addWidget(self.title_label)
        layout.addWidget(self.shorthand_label)
        layout.addWidget(self.notation_label)
        layout.addWidget(self.details_label)
        layout.addWidget(self.box_view, 1)

    def set_element(self, element: Element) -> None:
        summary = summarize_configuration(element)
        self.title_label.setText(
            f"{summary.atomic_number} {summary.symbol}: {summary.name} ({summary.localized_name})"
        )
        self.shorthand_label.setText(summary.shorthand)
        self.notation_label.setText(summary.notation)
        self.details_label.setText(
            f"Orbitals: {summary.orbital_count}   "
            f"Valence shell: n={summary.valence_shell} ({summary.valence_electrons} e⁻)   "
            f"Unpaired electrons: {summary.unpaired_electrons}"
        )
        self.box_view.set_element(element)

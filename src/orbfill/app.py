from __future__ import annotations

import sys

from PySide6 import QtCore, QtWidgets

from orbfill.chem.periodic_table import PeriodicTable
from orbfill.views.periodic_table_view import ConfigurationPanel, PeriodicTableGrid


class OrbFillWindow(QtWidgets.QMainWindow):
    def __init__(self, table: PeriodicTable | None = None) -> None:
        super().__init__()
        self.setWindowTitle("OrbFill")
        self.setMinimumSize(1200, 720)
        self.table = table if table is not None else PeriodicTable()

        self.grid = PeriodicTableGrid(self.table)
        self.panel = ConfigurationPanel()
        self.grid.element_selected.connect(self._show_element)

        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal)
        splitter.setChildrenCollapsible(False)
        splitter.addWidget(self.grid)
        splitter.addWidget(self.panel)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        self.statusBar().showMessage("Select an element to see its electron configuration.")
        if len(self.table):
            self.grid.select(1)

    def _show_element(self, element) -> None:
        self.panel.set_element(element)
        self.statusBar().showMessage(element.notation(shorten=True))


def main() -> None:
    app = QtWidgets.QApplication(sys.argv)
    app.setStyle("Fusion")
    window = OrbFillWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

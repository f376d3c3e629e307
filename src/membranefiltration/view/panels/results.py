from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGroupBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from membranefiltration.model.parameters import DerivedOutput


class ResultBlock(QWidget):
    """Formula, live value and a one-line description."""

    def __init__(self, formula: str, symbol: str, description: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.symbol = symbol

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(formula))

        self.value_label = QLabel()
        self.value_label.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(self.value_label)

        desc = QLabel(description)
        desc.setStyleSheet("color: #666;")
        layout.addWidget(desc)

    def set_text(self, formatted: str) -> None:
        self.value_label.setText(f"{self.symbol} = {formatted}")


class ResultsPanel(QGroupBox):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Results", parent)
        layout = QHBoxLayout(self)
        layout.setAlignment(Qt.AlignLeft)

        self.flux_block = ResultBlock("J = Pe(ΔP−Δπ)", "J", "Filtration rate across membrane")
        self.flow_block = ResultBlock("q = J⋅A", "q", "Total fluid flow")
        layout.addWidget(self.flux_block)
        layout.addWidget(self.flow_block)

    def update_results(self, derived: DerivedOutput) -> None:
        self.flux_block.set_text(derived.format_J())
        self.flow_block.set_text(derived.format_q())

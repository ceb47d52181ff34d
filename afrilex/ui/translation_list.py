from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QListWidget, QListWidgetItem
from PyQt6.QtGui import QColor, QBrush
from PyQt6.QtCore import Qt

from afrilex.graph_builder import Category, classify
from afrilex.resources.translations import tr
from afrilex.ui.graph_widget import TABLEAU10


class TranslationListWidget(QWidget):
    """Filterable list of translation cards."""

    def __init__(self):
        super().__init__()
        self.result = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        header = QHBoxLayout()
        self.count_label = QLabel("")
        header.addWidget(self.count_label, stretch=1)
        self.filter_input = QLineEdit()
        self.filter_input.setPlaceholderText(tr("filter_placeholder"))
        self.filter_input.textChanged.connect(self.refresh)
        header.addWidget(self.filter_input)
        layout.addLayout(header)

        self.list = QListWidget()
        self.list.setWordWrap(True)
        self.list.setSpacing(4)
        layout.addWidget(self.list)

    def set_result(self, result):
        self.result = result
        self.filter_input.clear()
        self.refresh()

    def retranslate(self):
        self.filter_input.setPlaceholderText(tr("filter_placeholder"))
        self.refresh()

    def refresh(self):
        self.list.clear()
        if self.result is None:
            self.count_label.setText("")
            return

        shown = self.result.filter(self.filter_input.text())
        self.count_label.setText(tr("lbl_showing").format(len(shown), len(self.result.translations)))

        for t in shown:
            lines = [f"{t.translated_word}   /{t.pronunciation}/" if t.pronunciation else t.translated_word,
                     f"{t.language.upper()}  ·  {t.family}  ·  {t.region}"]
            if t.notes:
                lines.append(t.notes)
            item = QListWidgetItem("\n".join(lines))
            if t.similarity_group is not None:
                item.setToolTip(f"{tr('lbl_group')} {t.similarity_group}")
                item.setForeground(QBrush(QColor(TABLEAU10[t.similarity_group % len(TABLEAU10)]).darker(130)))
            if classify(t.language) is Category.ANCHOR_A:
                item.setText(f"[{tr('lbl_classical')}] " + item.text())
                font = item.font()
                font.setBold(True)
                item.setFont(font)
            item.setData(Qt.ItemDataRole.UserRole, t)
            self.list.addItem(item)

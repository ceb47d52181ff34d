from PyQt6.QtWidgets import QDialog, QFormLayout, QHBoxLayout, QComboBox, QPushButton
from PyQt6.QtCore import pyqtSignal

from afrilex import config
from afrilex.resources.translations import tr

LANGUAGES = [("en", "English"), ("fr", "Français")]
THEMES = [("Light", "theme_light"), ("Dark", "theme_dark")]

DIALOG_STYLES = {
    "Light": """
        QDialog { background-color: #fbf8f1; color: #5a412c; }
        QComboBox { border: 1px solid #d0b380; padding: 4px; border-radius: 4px; }
        QPushButton { background-color: #1e4d68; color: white; padding: 5px 15px; border: none; border-radius: 4px; }
        QPushButton:hover { background-color: #2a7f87; }
        QPushButton#cancel { background-color: transparent; color: #9c4332; border: 1px solid #d0b380; }
    """,
    "Dark": """
        QDialog { background-color: #0d1d26; color: #cddce6; }
        QComboBox { border: 1px solid #719cb9; padding: 4px; border-radius: 4px; }
        QPushButton { background-color: #2a7f87; color: white; padding: 5px 15px; border: none; border-radius: 4px; }
        QPushButton:hover { background-color: #c59a5b; }
        QPushButton#cancel { background-color: transparent; color: #c59a5b; border: 1px solid #719cb9; }
    """,
}


class PreferencesDialog(QDialog):
    """Picks the interface language and the map theme."""
    settings_applied = pyqtSignal(str, str)  # lang code, theme name

    def __init__(self, parent=None, current_lang=None, current_theme=None):
        super().__init__(parent)
        current_lang = current_lang or config.ui_language()
        current_theme = current_theme or config.ui_theme()

        self.setWindowTitle(tr("pref_title"))
        self.setMinimumWidth(320)

        form = QFormLayout(self)

        self.lang_combo = QComboBox()
        for code, name in LANGUAGES:
            self.lang_combo.addItem(name, code)
        self.lang_combo.setCurrentIndex(max(0, self.lang_combo.findData(current_lang)))
        form.addRow(tr("pref_lang"), self.lang_combo)

        self.theme_combo = QComboBox()
        for theme, key in THEMES:
            self.theme_combo.addItem(tr(key), theme)
        self.theme_combo.setCurrentIndex(max(0, self.theme_combo.findData(current_theme)))
        form.addRow(tr("pref_theme"), self.theme_combo)

        btn_layout = QHBoxLayout()
        self.btn_cancel = QPushButton(tr("btn_cancel"))
        self.btn_cancel.setObjectName("cancel")
        self.btn_cancel.clicked.connect(self.reject)
        self.btn_save = QPushButton(tr("btn_save"))
        self.btn_save.setDefault(True)
        self.btn_save.clicked.connect(self.on_save)
        btn_layout.addStretch()
        btn_layout.addWidget(self.btn_cancel)
        btn_layout.addWidget(self.btn_save)
        form.addRow(btn_layout)

        self.setStyleSheet(DIALOG_STYLES.get(current_theme, DIALOG_STYLES["Light"]))

    def selection(self):
        return self.lang_combo.currentData(), self.theme_combo.currentData()

    def on_save(self):
        self.settings_applied.emit(*self.selection())
        self.accept()

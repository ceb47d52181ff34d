import logging

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QPushButton, QLabel, QLineEdit, QMessageBox, QHBoxLayout
from PyQt6.QtCore import QThread, pyqtSignal

from afrilex import config
from afrilex.research_service import ResearchError, search_cognates
from afrilex.resources.translations import tr

logger = logging.getLogger(__name__)


class SearchWorker(QThread):
    finished = pyqtSignal(object)  # ResearchResult
    error = pyqtSignal(str)

    def __init__(self, word, api_key, model_name):
        super().__init__()
        self.word = word
        self.api_key = api_key
        self.model_name = model_name

    def run(self):
        try:
            result = search_cognates(self.word, self.api_key, self.model_name)
        except ResearchError as e:
            self.error.emit(str(e))
            return
        except Exception as e:
            # Anything else must still re-enable the search button
            logger.exception("Unexpected research failure")
            self.error.emit(str(e))
            return
        self.finished.emit(result)


INPUT_STYLE = """
    QLineEdit {
        border: 1px solid #d0b380;
        padding: 5px;
        border-radius: 4px;
    }
"""


class SearchWidget(QWidget):
    search_started = pyqtSignal(str)
    result_ready = pyqtSignal(object)
    search_failed = pyqtSignal(str)

    def __init__(self):
        super().__init__()
        self.worker = None
        self.init_ui()

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        # Query row
        query_layout = QHBoxLayout()
        self.query_input = QLineEdit()
        self.query_input.setPlaceholderText(tr("search_placeholder"))
        self.query_input.setStyleSheet(INPUT_STYLE + "QLineEdit { font-size: 16px; padding: 8px; }")
        self.query_input.returnPressed.connect(self.run_search)
        query_layout.addWidget(self.query_input, stretch=1)

        self.search_btn = QPushButton(tr("btn_search"))
        self.search_btn.clicked.connect(self.run_search)
        self.search_btn.setStyleSheet("""
            QPushButton {
                background-color: #1e4d68;
                color: white;
                padding: 8px 16px;
                border-radius: 4px;
            }
            QPushButton:hover { background-color: #2a7f87; }
            QPushButton:disabled { background-color: #888; color: #ddd; }
        """)
        query_layout.addWidget(self.search_btn)
        layout.addLayout(query_layout)

        # Settings Row (API Key + Model)
        settings_layout = QHBoxLayout()
        self.api_key_input = QLineEdit()
        self.api_key_input.setPlaceholderText("GEMINI_API_KEY")
        self.api_key_input.setEchoMode(QLineEdit.EchoMode.Password)
        self.api_key_input.setStyleSheet(INPUT_STYLE)
        self.api_key_input.setText(config.api_key())
        self.api_key_label = QLabel(tr("lbl_api_key"))
        settings_layout.addWidget(self.api_key_label)
        settings_layout.addWidget(self.api_key_input, stretch=2)

        self.model_input = QLineEdit()
        self.model_input.setText(config.model_name())
        self.model_input.setStyleSheet(INPUT_STYLE)
        self.model_label = QLabel(tr("lbl_model"))
        settings_layout.addWidget(self.model_label)
        settings_layout.addWidget(self.model_input, stretch=1)
        layout.addLayout(settings_layout)

    def retranslate(self):
        self.query_input.setPlaceholderText(tr("search_placeholder"))
        self.search_btn.setText(tr("btn_search"))
        self.api_key_label.setText(tr("lbl_api_key"))
        self.model_label.setText(tr("lbl_model"))

    def get_creds(self):
        api_key = self.api_key_input.text().strip()
        model_name = self.model_input.text().strip()
        if not api_key:
            QMessageBox.warning(self, tr("msg_error"), tr("msg_missing_key"))
            return None, None
        if not model_name:
            QMessageBox.warning(self, tr("msg_error"), tr("msg_missing_model"))
            return None, None
        return api_key, model_name

    def run_search(self):
        word = self.query_input.text().strip()
        if not word:
            return
        if self.worker is not None and self.worker.isRunning():
            return

        key, model = self.get_creds()
        if not key:
            return

        self.search_btn.setEnabled(False)
        self.search_started.emit(word)

        self.worker = SearchWorker(word, key, model)
        self.worker.finished.connect(self.on_success)
        self.worker.error.connect(self.on_error)
        self.worker.start()

    def on_success(self, result):
        self.search_btn.setEnabled(True)
        self.result_ready.emit(result)

    def on_error(self, err_msg):
        self.search_btn.setEnabled(True)
        QMessageBox.critical(self, tr("msg_error"), err_msg)
        self.search_failed.emit(err_msg)

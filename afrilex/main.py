import html
import logging
import sys

from PyQt6.QtWidgets import (QApplication, QMainWindow, QVBoxLayout, QHBoxLayout, QWidget, QLabel,
                             QSplitter, QTextEdit, QTabWidget, QPushButton)
from PyQt6.QtGui import QAction, QPalette, QColor
from PyQt6.QtCore import Qt

from afrilex import config
from afrilex.graph_builder import Category, build_graph
from afrilex.graph_engine import GraphEngine
from afrilex.resources import translations as trans_module
from afrilex.resources.translations import tr
from afrilex.ui.graph_widget import GraphWidget
from afrilex.ui.preferences import PreferencesDialog
from afrilex.ui.search_widget import SearchWidget
from afrilex.ui.splash import SplashScreen
from afrilex.ui.translation_list import TranslationListWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(tr("app_title"))
        self.resize(1200, 800)

        # State
        self.current_theme = config.ui_theme()
        self.result = None

        # Setup Logic
        self.engine = GraphEngine()

        # Setup UI
        self.init_ui()
        self.setup_theme(self.current_theme)

        self.show_splash()

    def show_splash(self):
        self.splash = SplashScreen(self.central_widget)
        self.splash.resize(self.size())
        self.splash.show()

    def resizeEvent(self, event):
        if hasattr(self, 'splash'):
            self.splash.resize(self.size())
        super().resizeEvent(event)

    def init_ui(self):
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)

        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

        # Search bar
        self.search_panel = SearchWidget()
        self.search_panel.search_started.connect(self.on_search_started)
        self.search_panel.result_ready.connect(self.on_result)
        self.search_panel.search_failed.connect(self.on_search_failed)
        self.main_layout.addWidget(self.search_panel)

        self.info_label = QLabel(tr("info_idle"))
        self.info_label.setStyleSheet("padding: 5px; border-bottom: 1px solid #d0b380;")
        self.main_layout.addWidget(self.info_label)

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.main_layout.addWidget(self.splitter, stretch=1)

        # --- Left: analysis + node details ---
        self.tab_widget = QTabWidget()
        self.analysis_panel = QTextEdit()
        self.analysis_panel.setReadOnly(True)
        self.tab_widget.addTab(self.analysis_panel, tr("tab_analysis"))

        self.details_panel = QTextEdit()
        self.details_panel.setReadOnly(True)
        self.details_panel.setText(tr("lbl_details_hint"))
        self.tab_widget.addTab(self.details_panel, tr("tab_details"))
        self.splitter.addWidget(self.tab_widget)

        # --- Right: graph + card list ---
        self.right_tab_widget = QTabWidget()

        graph_container = QWidget()
        graph_layout = QVBoxLayout(graph_container)
        graph_layout.setContentsMargins(0, 0, 0, 0)
        self.graph_widget = GraphWidget(self.engine)
        self.graph_widget.nodeClicked.connect(self.on_node_clicked)
        self.graph_widget.zoomChanged.connect(self.on_zoom_changed)
        graph_layout.addWidget(self.graph_widget, stretch=1)

        controls = QHBoxLayout()
        controls.setContentsMargins(5, 5, 5, 5)
        self.zoom_label = QLabel(tr("lbl_zoom").format(round(self.graph_widget.viewport.scale * 100)))
        controls.addWidget(self.zoom_label)
        controls.addStretch()
        self.btn_zoom_in = QPushButton(tr("btn_zoom_in"))
        self.btn_zoom_in.clicked.connect(self.graph_widget.zoom_in)
        self.btn_zoom_out = QPushButton(tr("btn_zoom_out"))
        self.btn_zoom_out.clicked.connect(self.graph_widget.zoom_out)
        self.btn_reset = QPushButton(tr("btn_reset"))
        self.btn_reset.clicked.connect(self.reset_view)
        for btn in (self.btn_zoom_in, self.btn_zoom_out, self.btn_reset):
            controls.addWidget(btn)
        graph_layout.addLayout(controls)
        self.right_tab_widget.addTab(graph_container, tr("tab_graph"))

        self.list_panel = TranslationListWidget()
        self.right_tab_widget.addTab(self.list_panel, tr("tab_list"))
        self.splitter.addWidget(self.right_tab_widget)

        # Set Splitter Ratios (30% / 70%)
        self.splitter.setStretchFactor(0, 30)
        self.splitter.setStretchFactor(1, 70)

        self.create_menu()

    def create_menu(self):
        menu = self.menuBar()
        menu.clear() # Clear for re-creation (translation update)

        file_menu = menu.addMenu(tr("menu_file"))
        exit_action = QAction(tr("menu_exit"), self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        edit_menu = menu.addMenu(tr("menu_edit"))
        pref_action = QAction(tr("menu_prefs"), self)
        pref_action.triggered.connect(self.open_preferences)
        edit_menu.addAction(pref_action)

        view_menu = menu.addMenu(tr("menu_view"))
        reset_action = QAction(tr("menu_reset"), self)
        reset_action.setShortcut("Ctrl+0")
        reset_action.triggered.connect(self.reset_view)
        view_menu.addAction(reset_action)

    def open_preferences(self):
        dlg = PreferencesDialog(self, trans_module.CURRENT_LANG, self.current_theme)
        dlg.settings_applied.connect(self.apply_preferences)
        dlg.exec()

    def apply_preferences(self, lang, theme):
        if lang != trans_module.CURRENT_LANG:
            trans_module.CURRENT_LANG = lang
            self.retranslate()

        if theme != self.current_theme:
            self.setup_theme(theme)
            self.current_theme = theme

    def retranslate(self):
        self.setWindowTitle(tr("app_title"))
        self.create_menu()
        self.tab_widget.setTabText(0, tr("tab_analysis"))
        self.tab_widget.setTabText(1, tr("tab_details"))
        self.right_tab_widget.setTabText(0, tr("tab_graph"))
        self.right_tab_widget.setTabText(1, tr("tab_list"))
        self.btn_zoom_in.setText(tr("btn_zoom_in"))
        self.btn_zoom_out.setText(tr("btn_zoom_out"))
        self.btn_reset.setText(tr("btn_reset"))
        self.on_zoom_changed(self.graph_widget.viewport.scale)
        self.search_panel.retranslate()
        self.list_panel.retranslate()
        if self.result is None:
            self.info_label.setText(tr("info_idle"))
        else:
            self.show_result_info(self.result)

    def setup_theme(self, theme_name):
        app = QApplication.instance()
        app.setStyle("Fusion")

        palette = QPalette()
        if theme_name == "Dark":
            palette.setColor(QPalette.ColorRole.Window, QColor("#0d1d26"))
            palette.setColor(QPalette.ColorRole.WindowText, QColor("#cddce6"))
            palette.setColor(QPalette.ColorRole.Base, QColor("#163040"))
            palette.setColor(QPalette.ColorRole.AlternateBase, QColor("#0d1d26"))
            palette.setColor(QPalette.ColorRole.ToolTipBase, Qt.GlobalColor.black)
            palette.setColor(QPalette.ColorRole.ToolTipText, Qt.GlobalColor.white)
            palette.setColor(QPalette.ColorRole.Text, QColor("#cddce6"))
            palette.setColor(QPalette.ColorRole.Button, QColor("#163040"))
            palette.setColor(QPalette.ColorRole.ButtonText, QColor("#cddce6"))
            palette.setColor(QPalette.ColorRole.Highlight, QColor("#2a7f87"))
            palette.setColor(QPalette.ColorRole.HighlightedText, Qt.GlobalColor.white)

            sheet = """
            QTextEdit { background-color: #102530; color: #cddce6; font-family: 'Georgia', serif; font-size: 14px; border: none; padding: 10px; }
            """
        else:
            palette.setColor(QPalette.ColorRole.Window, QColor("#fbf8f1"))
            palette.setColor(QPalette.ColorRole.WindowText, QColor("#3b2a1c"))
            palette.setColor(QPalette.ColorRole.Base, Qt.GlobalColor.white)
            palette.setColor(QPalette.ColorRole.AlternateBase, QColor("#f4ecdc"))
            palette.setColor(QPalette.ColorRole.ToolTipBase, Qt.GlobalColor.white)
            palette.setColor(QPalette.ColorRole.ToolTipText, Qt.GlobalColor.black)
            palette.setColor(QPalette.ColorRole.Text, QColor("#3b2a1c"))
            palette.setColor(QPalette.ColorRole.Button, QColor("#f4ecdc"))
            palette.setColor(QPalette.ColorRole.ButtonText, QColor("#3b2a1c"))
            palette.setColor(QPalette.ColorRole.Highlight, QColor("#1e4d68"))
            palette.setColor(QPalette.ColorRole.HighlightedText, Qt.GlobalColor.white)

            sheet = """
            QTextEdit { background-color: #ffffff; color: #3b2a1c; font-family: 'Georgia', serif; font-size: 14px; border: none; padding: 10px; }
            """

        app.setPalette(palette)
        self.analysis_panel.setStyleSheet(sheet)
        self.details_panel.setStyleSheet(sheet)
        self.graph_widget.set_dark_mode(theme_name == "Dark")

    def on_search_started(self, word):
        self.info_label.setText(tr("info_searching").format(word))

    def on_search_failed(self, err_msg):
        logger.warning("Research failed: %s", err_msg)
        self.info_label.setText(tr("info_failed"))

    def on_result(self, result):
        self.result = result
        self.show_result_info(result)

        self.analysis_panel.setHtml(
            f"<h2>{html.escape(result.source_word)}</h2>"
            f"<p>{html.escape(result.linguistic_analysis)}</p>"
        )
        self.details_panel.setText(tr("lbl_details_hint"))
        self.tab_widget.setCurrentIndex(0)

        self.graph_widget.set_graph(build_graph(result.translations, result.source_word))
        self.list_panel.set_result(result)

    def show_result_info(self, result):
        self.info_label.setText(tr("info_loaded").format(
            result.source_word, len(result.translations), result.language_count))

    def on_node_clicked(self, uid):
        node = self.engine.nodes.get(uid)
        if node is None:
            return
        record = node.data.get("record")
        if record is None:
            # Root
            self.details_panel.setHtml(f"<h1>{html.escape(node.label.upper())}</h1>")
        else:
            text = f"<h1>{html.escape(record.translated_word)}</h1>"
            if node.data.get("category") is Category.ANCHOR_A:
                text += f"<p><b>{tr('lbl_classical')}</b></p>"
            text += f"<h3>{html.escape(record.language)}</h3><ul>"
            text += f"<li>{tr('lbl_pronunciation')}: /{html.escape(record.pronunciation)}/</li>"
            text += f"<li>{tr('lbl_family')}: {html.escape(record.family)}</li>"
            text += f"<li>{tr('lbl_region')}: {html.escape(record.region)}</li>"
            if record.similarity_group is not None:
                text += f"<li>{tr('lbl_group')}: {record.similarity_group}</li>"
            text += "</ul>"
            if record.notes:
                text += f"<h3>{tr('lbl_notes')}</h3><p>{html.escape(record.notes)}</p>"
            self.details_panel.setHtml(text)
        self.tab_widget.setCurrentIndex(1)

    def on_zoom_changed(self, scale):
        self.zoom_label.setText(tr("lbl_zoom").format(round(scale * 100)))

    def reset_view(self):
        self.graph_widget.reset_view()


def run():
    logging.basicConfig(level=logging.INFO)
    trans_module.CURRENT_LANG = config.ui_language()
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    run()

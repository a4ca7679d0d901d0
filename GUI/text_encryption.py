import sys
from PyQt6.QtWidgets import (
    QApplication, QWidget, QLabel, QTextEdit, QLineEdit,
    QPushButton, QVBoxLayout, QHBoxLayout, QSpinBox,
    QComboBox, QGroupBox, QMessageBox
)

from config.settings    import Settings
from core.cipher_engine import (
    CipherFactory, CipherMode, ConfigurationError, InvalidKey,
    WorkerFailure,
)
from core.chunk_engine  import ChunkedCipherEngine
from utils.transform_char import normalize_text

PANEL_STYLE = """
    QWidget { background-color: #1e1e1e; color: #eaeaea; font-size: 13px; }
    QTextEdit, QLineEdit, QComboBox, QSpinBox {
        background-color: #2a2a2a; border: 1px solid #3a3a3a;
        border-radius: 4px; padding: 4px;
    }
    QGroupBox { border: 1px solid #3a3a3a; margin-top: 8px; padding: 8px; }
    QPushButton { background-color: #34495e; padding: 8px 24px; border-radius: 6px; }
    QPushButton#primary { background-color: #2c7be5; font-weight: bold; }
"""


class TextEncryptionUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(f"{Settings.APP_NAME} – Text Cipher")
        self.setGeometry(200, 100, 900, 600)

        self.setStyleSheet(PANEL_STYLE)

        main_layout = QVBoxLayout(self)

        # ---------- Header ----------
        title = QLabel("Text Encryption / Decryption")
        title.setStyleSheet("font-size: 20px; font-weight: bold; color: white;")
        main_layout.addWidget(title)

        subtitle = QLabel("Classical ciphers, applied in parallel chunks")
        subtitle.setStyleSheet("color: #b0b0b0;")
        main_layout.addWidget(subtitle)

        main_layout.addSpacing(15)

        # ---------- Controls ----------
        controls = QHBoxLayout()

        algo_label = QLabel("Cipher:")
        self.algorithm_box = QComboBox()
        self.algorithm_box.addItems(CipherFactory.list_ciphers())

        key_label = QLabel("Key:")
        self.key_edit = QLineEdit()
        self.key_edit.setPlaceholderText("shift or keyword")

        workers_label = QLabel("Threads:")
        self.workers_box = QSpinBox()
        self.workers_box.setRange(1, 64)
        self.workers_box.setValue(Settings.DEFAULT_WORKERS)

        controls.addWidget(algo_label)
        controls.addWidget(self.algorithm_box)
        controls.addSpacing(20)
        controls.addWidget(key_label)
        controls.addWidget(self.key_edit)
        controls.addSpacing(20)
        controls.addWidget(workers_label)
        controls.addWidget(self.workers_box)
        controls.addStretch()

        main_layout.addLayout(controls)

        # ---------- Input Box ----------
        input_group = QGroupBox("Input Text")
        input_layout = QVBoxLayout()

        self.input_text = QTextEdit()
        self.input_text.setPlaceholderText("Enter plain text or cipher text here...")

        input_layout.addWidget(self.input_text)
        input_group.setLayout(input_layout)
        main_layout.addWidget(input_group)

        # ---------- Buttons ----------
        btn_layout = QHBoxLayout()

        encrypt_btn = QPushButton("Encrypt")
        decrypt_btn = QPushButton("Decrypt")

        encrypt_btn.setObjectName("primary")

        encrypt_btn.clicked.connect(self.encrypt_text)
        decrypt_btn.clicked.connect(self.decrypt_text)

        btn_layout.addStretch()
        btn_layout.addWidget(encrypt_btn)
        btn_layout.addWidget(decrypt_btn)
        btn_layout.addStretch()

        main_layout.addLayout(btn_layout)

        # ---------- Output Box ----------
        output_group = QGroupBox("Output")
        output_layout = QVBoxLayout()

        self.output_text = QTextEdit()
        self.output_text.setReadOnly(True)
        self.output_text.setPlaceholderText("Encrypted or decrypted output will appear here...")

        output_layout.addWidget(self.output_text)
        output_group.setLayout(output_layout)
        main_layout.addWidget(output_group)

        main_layout.addStretch()

    # ---------- Cipher Logic ----------
    def encrypt_text(self):
        self._run(CipherMode.ENCRYPT)

    def decrypt_text(self):
        self._run(CipherMode.DECRYPT)

    def _run(self, mode):
        text = normalize_text(self.input_text.toPlainText())
        if not text:
            self.show_warning("Input Required",
                              f"Please enter text to {mode.value}.")
            return
        try:
            cipher = CipherFactory.create(
                self.algorithm_box.currentText(), self.key_edit.text()
            )
            engine = ChunkedCipherEngine(workers=self.workers_box.value())
            self.output_text.setText(engine.run(cipher, text, mode))
        except InvalidKey as exc:
            self.show_warning("Invalid Key", str(exc))
        except (ConfigurationError, WorkerFailure) as exc:
            self.show_warning("Cipher Failed", str(exc))

    def show_warning(self, title, msg):
        QMessageBox.warning(self, title, msg)


def launch() -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(Settings.APP_NAME)
    app.setApplicationVersion(Settings.APP_VERSION)
    window = TextEncryptionUI()
    window.show()
    return app.exec()


# ---------- Run ----------
if __name__ == "__main__":
    sys.exit(launch())

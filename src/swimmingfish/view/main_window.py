"""
Main Application Window
=======================
A plain window with a single fish in the middle.
"""
from PySide6.QtWidgets import QMainWindow, QWidget

from swimmingfish import config
from swimmingfish.model.body_plan import BodyPlan
from swimmingfish.view.fish_widget import FishWidget


class MainWindow(QMainWindow):
    def __init__(self, plan: BodyPlan | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(config.VISIBLE_APP_NAME)

        self.fish = FishWidget(plan=plan)
        self.setCentralWidget(self.fish)
        self.resize(self.fish.sizeHint())

from stopwatch_gui.view.design_canvas import DesignCanvas
from stopwatch_gui.view.main_window import MainWindow
from stopwatch_gui.view.signal_panel import SignalPanel
from stopwatch_gui.view.status_bar import StatusBar
from stopwatch_gui.view.top_bar import TopBar

__all__ = [
    "DesignCanvas",
    "MainWindow",
    "SignalPanel",
    "StatusBar",
    "TopBar",
]

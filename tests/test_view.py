import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QApplication

from membranefiltration.app.state import ParameterStore
from membranefiltration.controller.drag import DragState
from membranefiltration.view.main_window import MainWindow
from membranefiltration.view.membrane_view import MembraneView


def mouse_event(kind, x, y):
    pos = QPointF(x, y)
    buttons = Qt.NoButton if kind == QEvent.Type.MouseButtonRelease else Qt.LeftButton
    return QMouseEvent(kind, pos, pos, Qt.LeftButton, buttons, Qt.NoModifier)


@pytest.fixture
def view(qapp):
    store = ParameterStore()
    view = MembraneView(store)
    view.plot.setFixedSize(800, 300)
    view.slider.setFixedSize(800, 40)
    view.redraw()
    view.activate()
    yield view
    view.deactivate()


def press(view, x, y=20):
    view.slider.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, x, y))


def move(view, x, y=20):
    view.slider.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, x, y))


def test_both_canvases_share_one_frame(view):
    frame = view.current_frame()
    assert frame is not None
    assert view.plot.frame() is frame
    assert view.slider.frame() is frame
    assert frame.scale.x_scale == 16.0


def test_drag_to_centre(view):
    press(view, 100)
    move(view, 400)
    assert view.store.parameters.delta_p == 25.0
    assert view.current_frame().parameters.delta_p == 25.0
    assert view.results_panel.flux_block.value_label.text() == "J = 15.00"
    assert view.delta_p_label.text() == "Hydrostatic Pressure Gradient (ΔP): 25 mmHg"


def test_drag_past_right_edge_clamps(view):
    press(view, 700)
    move(view, 1500)
    assert view.store.parameters.delta_p == 50.0


def test_move_without_press_is_ignored(view):
    move(view, 400)
    assert view.store.parameters.delta_p == 20.0


def test_release_outside_slider_ends_drag(view):
    press(view, 400)
    move(view, 1000)
    assert view.controller.state is DragState.DRAGGING

    # Released over a different widget
    QApplication.sendEvent(view.results_panel, mouse_event(QEvent.Type.MouseButtonRelease, 5, 5))
    assert view.controller.state is DragState.IDLE

    move(view, 100)
    assert view.store.parameters.delta_p == 50.0


def test_activate_is_idempotent(view):
    view.activate()
    assert view.release_watcher.is_installed
    view.deactivate()
    assert not view.release_watcher.is_installed
    view.deactivate()


def test_slider_panel_writes_store(view):
    view.parameter_panel.sliders["Pe"].slider.setValue(19)
    assert view.store.parameters.Pe == 2.0
    assert view.results_panel.flux_block.value_label.text() == "J = 20.00"
    assert view.results_panel.flow_block.value_label.text() == "q = 200.00"


def test_store_reset_syncs_sliders(view):
    view.store.set_value("A", 25.0)
    assert view.parameter_panel.sliders["A"].value() == 25.0
    view.store.reset()
    assert view.parameter_panel.sliders["A"].value() == 10.0


def test_main_window_lifecycle(qapp):
    window = MainWindow(ParameterStore())
    window.show()
    assert window.view.release_watcher.is_installed
    window.close()
    assert not window.view.release_watcher.is_installed

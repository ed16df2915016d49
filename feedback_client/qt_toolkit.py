"""PyQt6 implementation of the feedback toolkit contract."""
from __future__ import annotations

import logging
import math
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional, Tuple

from PyQt6.QtCore import QEvent, QObject, QPoint, QPointF, QRect, QRectF, Qt, QTimer
from PyQt6.QtGui import QColor, QFont, QGuiApplication, QMouseEvent, QPainter, QPainterPath, QPolygonF
from PyQt6.QtWidgets import QApplication, QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from feedback_client.color_utils import css_rgba, qcolor_from_token, with_alpha  # type: ignore
from feedback_client.rich_text import RichText  # type: ignore
from feedback_client.screens import ScreenKind  # type: ignore
from feedback_client.theme import Theme, ThemeAttr  # type: ignore
from feedback_client.toolkit import (  # type: ignore
    TOOLTIP_CAPTION_LAYOUT,
    ArrowOrientation,
    Balloon,
    BannerHandle,
    CaptionView,
    FeedbackToolkit,
    Gravity,
    SpotlightListener,
    SpotlightTarget,
    ToastHandle,
    TooltipConfig,
)

_LOGGER = logging.getLogger("WikiFeedback.Client.qt_toolkit")

BANNER_MARGIN = 8
BANNER_BACKGROUND = "#323232"
BANNER_TEXT_COLOR = "#ffffff"
BASELINE_DPI = 96.0
SPOTLIGHT_TARGET_PADDING = 20
SPOTLIGHT_OUTER_PADDING = 120
SPOTLIGHT_DIM = QColor(0, 0, 0, 80)

LayoutFactory = Callable[[Any], QWidget]


class _BannerQueue:
    """FIFO of banners for one container; only the head is on screen."""

    def __init__(self, container: QWidget) -> None:
        self._container = container
        self._pending: Deque["_Banner"] = deque()
        self._current: Optional["_Banner"] = None

    @property
    def current(self) -> Optional["_Banner"]:
        return self._current

    @property
    def pending(self) -> Tuple["_Banner", ...]:
        return tuple(self._pending)

    def enqueue(self, banner: "_Banner") -> None:
        self._pending.append(banner)
        if self._current is None:
            self._advance()

    def remove(self, banner: "_Banner") -> None:
        if banner is self._current:
            self._current = None
            self._advance()
            return
        try:
            self._pending.remove(banner)
        except ValueError:
            pass

    def _advance(self) -> None:
        if not self._pending:
            return
        self._current = self._pending.popleft()
        self._current._present(self._container)


class _Banner(BannerHandle):
    def __init__(self, queue: _BannerQueue, text: RichText, duration: int) -> None:
        self._queue = queue
        self.text = text
        self.duration = duration
        self.action_label: Optional[str] = None
        self._action_callback: Optional[Callable[[], None]] = None
        self.action_color: Optional[str] = None
        self._link_handler: Optional[Callable[[str], None]] = None
        self.widget: Optional[QFrame] = None
        self._timer: Optional[QTimer] = None
        self._done = False

    def set_action(self, label: str, callback: Callable[[], None]) -> None:
        self.action_label = label
        self._action_callback = callback

    def set_action_text_color(self, color: str) -> None:
        self.action_color = color

    def set_link_handler(self, handler: Callable[[str], None]) -> None:
        self._link_handler = handler

    def show(self) -> None:
        if self._done:
            _LOGGER.debug("Ignoring show() on dismissed banner '%s'", self.text.plain)
            return
        self._queue.enqueue(self)

    def dismiss(self) -> None:
        if self._done:
            return
        self._done = True
        if self._timer is not None:
            self._timer.stop()
        if self.widget is not None:
            self.widget.hide()
            self.widget.deleteLater()
            self.widget = None
        self._queue.remove(self)

    def _on_link(self, url: str) -> None:
        if self._link_handler is not None:
            self._link_handler(url)

    def _on_action(self) -> None:
        callback = self._action_callback
        self.dismiss()
        if callback is not None:
            callback()

    def _present(self, container: QWidget) -> None:
        frame = QFrame(container)
        frame.setObjectName("feedbackBanner")
        background = css_rgba(qcolor_from_token(BANNER_BACKGROUND))
        frame.setStyleSheet(f"#feedbackBanner {{ background-color: {background}; border-radius: 4px; }}")
        layout = QHBoxLayout(frame)
        layout.setContentsMargins(16, 10, 8, 10)
        label = QLabel(self.text.to_html(), frame)
        label.setObjectName("feedbackBannerText")
        label.setTextFormat(Qt.TextFormat.RichText)
        label.setWordWrap(True)
        label.setOpenExternalLinks(False)
        label.setTextInteractionFlags(Qt.TextInteractionFlag.LinksAccessibleByMouse)
        label.setStyleSheet(f"color: {BANNER_TEXT_COLOR};")
        label.linkActivated.connect(self._on_link)
        layout.addWidget(label, 1)
        if self.action_label:
            button = QPushButton(self.action_label, frame)
            button.setObjectName("feedbackBannerAction")
            button.setFlat(True)
            color = qcolor_from_token(self.action_color)
            button.setStyleSheet(f"color: {color.name()}; font-weight: bold; border: none;")
            button.clicked.connect(self._on_action)
            layout.addWidget(button, 0)
        width = max(1, container.width() - 2 * BANNER_MARGIN)
        frame.setFixedWidth(width)
        frame.adjustSize()
        frame.move(BANNER_MARGIN, max(0, container.height() - frame.height() - BANNER_MARGIN))
        frame.raise_()
        frame.show()
        self.widget = frame
        if self.duration > 0:
            timer = QTimer(frame)
            timer.setSingleShot(True)
            timer.timeout.connect(self.dismiss)
            timer.start(self.duration)
            self._timer = timer
        _LOGGER.debug("Banner presented: '%s' (%sms)", self.text.plain, self.duration)


class _CaptionLabel(QLabel, CaptionView):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("message")
        self.setStyleSheet(
            "background-color: rgba(97, 97, 97, 230); color: #ffffff; padding: 6px 10px; border-radius: 4px;"
        )
        self._max_lines: Optional[int] = 1

    @property
    def max_lines(self) -> Optional[int]:
        return self._max_lines

    def set_text(self, text: str) -> None:
        self.setText(text)

    def set_max_lines(self, lines: Optional[int]) -> None:
        self._max_lines = lines
        self.setWordWrap(lines is None or lines > 1)
        if lines is None:
            self.setMaximumHeight(16777215)
        else:
            self.setMaximumHeight(self.fontMetrics().lineSpacing() * max(1, lines) + 12)


class _Toast(ToastHandle):
    def __init__(self, context: Any, text: str, duration: int) -> None:
        self._context = context
        self.text = text
        self.duration = duration
        self.view: Optional[QWidget] = None
        self.gravity = Gravity.NO_GRAVITY
        self.offset = (0, 0)

    def set_view(self, view: CaptionView) -> None:
        self.view = view  # type: ignore[assignment]

    def set_gravity(self, gravity: Gravity, x_offset: int, y_offset: int) -> None:
        self.gravity = gravity
        self.offset = (int(x_offset), int(y_offset))

    def _position(self, widget: QWidget) -> QPoint:
        screen = QGuiApplication.primaryScreen()
        area = screen.availableGeometry() if screen is not None else QRect(0, 0, 1280, 800)
        x_off, y_off = self.offset
        # TOP|START offsets are already global coordinates.
        x = x_off
        y = y_off
        if (self.gravity & Gravity.START) != Gravity.START:
            x = area.left() + (area.width() - widget.width()) // 2 + x_off
        if (self.gravity & Gravity.BOTTOM) == Gravity.BOTTOM:
            y = area.bottom() - widget.height() - y_off
        x = max(area.left(), min(x, area.right() + 1 - widget.width()))
        y = max(area.top(), min(y, area.bottom() + 1 - widget.height()))
        return QPoint(x, y)

    def show(self) -> None:
        widget = self.view
        if widget is None:
            caption = _CaptionLabel()
            caption.set_text(self.text)
            widget = caption
            self.view = widget
        widget.setParent(None)
        widget.setWindowFlags(
            Qt.WindowType.ToolTip | Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint
        )
        widget.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)
        widget.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        widget.adjustSize()
        widget.move(self._position(widget))
        widget.show()
        if self.duration > 0:
            QTimer.singleShot(self.duration, self.cancel)

    def cancel(self) -> None:
        widget = self.view
        if widget is None:
            return
        self.view = None
        widget.close()
        widget.deleteLater()


class _BalloonWidget(QWidget, Balloon):
    """Frameless pop-over painting a rounded body plus an arrow toward the anchor."""

    def __init__(self, toolkit: "QtFeedbackToolkit", context: Any, config: TooltipConfig) -> None:
        super().__init__(None)
        self.config = config
        self._arrow_x = 0.0
        flags = Qt.WindowType.FramelessWindowHint | Qt.WindowType.NoDropShadowWindowHint
        flags |= Qt.WindowType.Popup if config.dismiss_when_touch_outside else Qt.WindowType.Tool
        self.setWindowFlags(flags)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)
        self._background = qcolor_from_token(config.background_color)
        arrow = max(0, config.arrow_size // 2)
        top_inset = config.margin_top + (arrow if config.arrow_orientation is ArrowOrientation.TOP else 0)
        bottom_inset = config.margin_bottom + (arrow if config.arrow_orientation is ArrowOrientation.BOTTOM else 0)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            config.margin_left + config.padding,
            top_inset + config.padding,
            config.margin_right + config.padding,
            bottom_inset + config.padding,
        )
        if config.layout:
            content = toolkit.inflate_layout(context, config.layout)
            content.setParent(self)
        else:
            content = QLabel(config.text.to_html() if config.text is not None else "", self)
            content.setTextFormat(Qt.TextFormat.RichText)
            content.setWordWrap(True)
            font = QFont(config.text_typeface.replace("-medium", ""))
            font.setPointSizeF(config.text_size)
            font.setWeight(QFont.Weight.DemiBold if config.text_typeface.endswith("-medium") else QFont.Weight.Normal)
            content.setFont(font)
            content.setStyleSheet(f"color: {qcolor_from_token(config.text_color, '#ffffff').name()};")
        self.content = content
        layout.addWidget(content)
        self._apply_size(toolkit, context)

    def _apply_size(self, toolkit: "QtFeedbackToolkit", context: Any) -> None:
        cfg = self.config
        if cfg.width_ratio > 0:
            width = int(toolkit.window_width(context) * cfg.width_ratio)
            self.setFixedWidth(max(1, width))
        if cfg.height:
            margins = self.layout().contentsMargins()
            self.setFixedHeight(cfg.height + margins.top() + margins.bottom())
        self.adjustSize()

    @property
    def arrow_x(self) -> float:
        return self._arrow_x

    def _place(self, anchor: QWidget, top: bool, x_offset: int, y_offset: int) -> None:
        origin = anchor.mapToGlobal(QPoint(0, 0))
        anchor_center = origin.x() + anchor.width() / 2.0
        x = int(round(anchor_center - self.width() / 2.0)) + x_offset
        if top:
            y = origin.y() - self.height() + y_offset
        else:
            y = origin.y() + anchor.height() + y_offset
        screen = anchor.screen() or QGuiApplication.primaryScreen()
        if screen is not None:
            area = screen.availableGeometry()
            x = max(area.left(), min(x, area.right() - self.width()))
        self.move(x, y)
        cfg = self.config
        body_left = cfg.margin_left + cfg.arrow_size / 2.0
        body_right = self.width() - cfg.margin_right - cfg.arrow_size / 2.0
        desired = anchor_center - x + cfg.arrow_align_anchor_padding
        self._arrow_x = max(body_left, min(desired, body_right))
        self.show()
        self.raise_()

    def show_align_top(self, anchor: Any, x_offset: int = 0, y_offset: int = 0) -> None:
        self._place(anchor, True, x_offset, y_offset)

    def show_align_bottom(self, anchor: Any, x_offset: int = 0, y_offset: int = 0) -> None:
        self._place(anchor, False, x_offset, y_offset)

    def dismiss(self) -> None:
        self.close()
        self.deleteLater()

    def paintEvent(self, _event) -> None:  # noqa: N802
        cfg = self.config
        arrow = cfg.arrow_size / 2.0
        body = QRectF(
            cfg.margin_left,
            cfg.margin_top + (arrow if cfg.arrow_orientation is ArrowOrientation.TOP else 0),
            self.width() - cfg.margin_left - cfg.margin_right,
            self.height()
            - cfg.margin_top
            - cfg.margin_bottom
            - arrow,
        )
        path = QPainterPath()
        path.addRoundedRect(body, 6.0, 6.0)
        if cfg.arrow_orientation is ArrowOrientation.TOP:
            tip = QPointF(self._arrow_x, body.top() - arrow)
            base_y = body.top()
        else:
            tip = QPointF(self._arrow_x, body.bottom() + arrow)
            base_y = body.bottom()
        triangle = QPolygonF([QPointF(self._arrow_x - arrow, base_y), tip, QPointF(self._arrow_x + arrow, base_y)])
        arrow_path = QPainterPath()
        arrow_path.addPolygon(triangle)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.fillPath(path.united(arrow_path), self._background)
        painter.end()


class _SpotlightOverlay(QWidget):
    def __init__(self, host: QWidget, target: SpotlightTarget, listener: SpotlightListener) -> None:
        super().__init__(host)
        self.target = target
        self._listener = listener
        self._dismissed = False
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground, True)
        self.setGeometry(host.rect())
        view: QWidget = target.view
        center = view.mapTo(host, QPoint(view.width() // 2, view.height() // 2))
        self.center = QPointF(center)
        self.target_radius = math.hypot(view.width(), view.height()) / 2.0 + SPOTLIGHT_TARGET_PADDING
        self.outer_radius = self.target_radius + SPOTLIGHT_OUTER_PADDING
        self._outer_color = with_alpha(qcolor_from_token(target.outer_circle_color), target.outer_circle_alpha)
        self._target_color = qcolor_from_token(target.target_circle_color)

    def _circle(self, radius: float) -> QPainterPath:
        path = QPainterPath()
        path.addEllipse(self.center, radius, radius)
        return path

    def paintEvent(self, _event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        everything = QPainterPath()
        everything.addRect(QRectF(self.rect()))
        outer = self._circle(self.outer_radius)
        inner = self._circle(self.target_radius)
        painter.fillPath(everything.subtracted(outer), SPOTLIGHT_DIM)
        painter.fillPath(outer.subtracted(inner), self._outer_color)
        if not self.target.transparent_target:
            painter.fillPath(inner, self._target_color)
        painter.setPen(QColor("#ffffff"))
        title_font = QFont(self.font())
        title_font.setPointSizeF(18.0)
        title_font.setWeight(QFont.Weight.Bold)
        painter.setFont(title_font)
        text_top = self.center.y() + self.target_radius + 12
        text_rect = QRectF(self.center.x() - self.outer_radius + 24, text_top, 2 * self.outer_radius - 48, 32)
        painter.drawText(text_rect, int(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop), self.target.title)
        body_font = QFont(self.font())
        body_font.setPointSizeF(13.0)
        painter.setFont(body_font)
        body_rect = QRectF(text_rect.left(), text_rect.bottom() + 4, text_rect.width(), 64)
        painter.drawText(
            body_rect,
            int(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop | Qt.TextFlag.TextWordWrap),
            self.target.description,
        )
        painter.end()

    def _distance(self, point: QPointF) -> float:
        return math.hypot(point.x() - self.center.x(), point.y() - self.center.y())

    def handle_press(self, point: QPointF) -> None:
        distance = self._distance(point)
        if distance <= self.target_radius:
            self._listener.on_target_hit(self.target)
            self.dismiss(user_initiated=True)
        elif distance > self.outer_radius and self.target.cancelable:
            self._listener.on_target_cancelled(self.target)
            self.dismiss(user_initiated=True)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        self.handle_press(event.position())
        event.accept()

    def dismiss(self, user_initiated: bool = False) -> None:
        if self._dismissed:
            return
        self._dismissed = True
        self.hide()
        self.deleteLater()
        self._listener.on_dismissed(self.target, user_initiated)


class _LongPressFilter(QObject):
    def __init__(self, view: QWidget, handler: Callable[[Any], bool], timeout_ms: int) -> None:
        super().__init__(view)
        self._view = view
        self._handler = handler
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(timeout_ms)
        self._timer.timeout.connect(self.trigger)
        self._press_pos: Optional[QPointF] = None
        self._consumed = False

    def trigger(self) -> bool:
        self._consumed = bool(self._handler(self._view))
        return self._consumed

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        kind = event.type()
        if kind == QEvent.Type.MouseButtonPress and event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position()
            self._consumed = False
            self._timer.start()
        elif kind == QEvent.Type.MouseMove and self._press_pos is not None:
            moved = event.position() - self._press_pos
            if moved.manhattanLength() > QApplication.startDragDistance():
                self._timer.stop()
                self._press_pos = None
        elif kind == QEvent.Type.MouseButtonRelease:
            self._timer.stop()
            self._press_pos = None
            if self._consumed:
                self._consumed = False
                return True
        return False


class QtFeedbackToolkit(FeedbackToolkit):
    def __init__(self, theme: Theme, *, long_press_timeout_ms: int = 500) -> None:
        self._theme = theme
        self._long_press_timeout_ms = max(1, int(long_press_timeout_ms))
        self._queues: Dict[int, _BannerQueue] = {}
        self._layouts: Dict[str, LayoutFactory] = {}

    @property
    def theme(self) -> Theme:
        return self._theme

    def register_layout(self, name: str, factory: LayoutFactory) -> None:
        self._layouts[name] = factory

    def banner_queue(self, container: QWidget) -> _BannerQueue:
        key = id(container)
        queue = self._queues.get(key)
        if queue is None:
            queue = _BannerQueue(container)
            self._queues[key] = queue
            container.destroyed.connect(lambda *_args, k=key: self._queues.pop(k, None))
        return queue

    def make_banner(self, container: Any, text: RichText, duration: int) -> BannerHandle:
        return _Banner(self.banner_queue(container), text, duration)

    def make_toast(self, context: Any, text: str, duration: int) -> ToastHandle:
        return _Toast(context, text, duration)

    def inflate(self, context: Any, layout: str) -> CaptionView:
        if layout == TOOLTIP_CAPTION_LAYOUT:
            return _CaptionLabel()
        return self.inflate_layout(context, layout)  # type: ignore[return-value]

    def inflate_layout(self, context: Any, layout: str) -> QWidget:
        factory = self._layouts.get(layout)
        if factory is None:
            raise KeyError(f"No layout registered under '{layout}'")
        return factory(context)

    def create_balloon(self, context: Any, config: TooltipConfig) -> Balloon:
        return _BalloonWidget(self, context, config)

    def show_spotlight(self, screen: Any, target: SpotlightTarget, listener: SpotlightListener) -> Any:
        view = target.view
        if not isinstance(view, QWidget) or not view.isVisible():
            raise RuntimeError("Spotlight target must be attached to a visible window")
        host = screen.window() if isinstance(screen, QWidget) else view.window()
        overlay = _SpotlightOverlay(host, target, listener)
        overlay.show()
        overlay.raise_()
        return overlay

    def content_description(self, view: Any) -> str:
        for getter in ("accessibleDescription", "accessibleName", "toolTip", "text"):
            method = getattr(view, getter, None)
            if not callable(method):
                continue
            value = method()
            if value:
                return str(value)
        return ""

    def location_on_screen(self, view: Any) -> Tuple[int, int]:
        point = view.mapToGlobal(QPoint(0, 0))
        return point.x(), point.y()

    def host_screen(self, view: Any) -> Optional[Any]:
        window = view.window() if isinstance(view, QWidget) else None
        if window is not None and isinstance(getattr(window, "kind", None), ScreenKind):
            return window
        return None

    def set_on_long_click(self, view: Any, handler: Callable[[Any], bool]) -> None:
        existing = getattr(view, "_feedback_long_press", None)
        if existing is not None:
            view.removeEventFilter(existing)
        long_press = _LongPressFilter(view, handler, self._long_press_timeout_ms)
        view.installEventFilter(long_press)
        view._feedback_long_press = long_press

    def themed_color(self, context: Any, attr: ThemeAttr) -> str:
        return self._theme.color(attr)

    def dp_to_px(self, dp: float) -> int:
        screen = QGuiApplication.primaryScreen()
        dpi = screen.logicalDotsPerInch() if screen is not None else BASELINE_DPI
        return int(round(dp * dpi / BASELINE_DPI))

    def window_width(self, context: Any) -> int:
        if isinstance(context, QWidget):
            return context.window().width()
        screen = QGuiApplication.primaryScreen()
        return screen.availableGeometry().width() if screen is not None else 0

    def is_landscape(self, context: Any) -> bool:
        if isinstance(context, QWidget):
            window = context.window()
            return window.width() > window.height()
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return False
        size = screen.availableGeometry()
        return size.width() > size.height()

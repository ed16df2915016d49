from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from feedback_client import analytics
from feedback_client.analytics import SuggestedEditsFunnel
from feedback_client.resources import ResourceStore
from feedback_client.screens import CurrentTooltipSlot, HostScreen, ScreenKind
from feedback_client.theme import ThemeAttr
from feedback_client.toolkit import (
    Balloon,
    BannerHandle,
    CaptionView,
    FeedbackToolkit,
    SpotlightListener,
    SpotlightTarget,
    ToastHandle,
    TooltipConfig,
)
from feedback_client.url_launcher import ExternalUrlLauncher


def pytest_runtest_setup(item):
    if item.get_closest_marker("pyqt_required"):
        if not os.getenv("PYQT_TESTS"):
            pytest.skip("PYQT_TESTS not set; skipping PyQt-dependent test")


class StubView:
    def __init__(
        self,
        name: str = "view",
        *,
        description: str = "",
        location: Tuple[int, int] = (0, 0),
        host: Optional[Any] = None,
    ) -> None:
        self.name = name
        self.description = description
        self.location = location
        self.host = host

    def __repr__(self) -> str:
        return f"StubView({self.name!r})"


class StubScreen(HostScreen):
    def __init__(self, kind: ScreenKind = ScreenKind.OTHER, *, resources: Optional[ResourceStore] = None) -> None:
        self.kind = kind
        self.views: Dict[str, StubView] = {}
        self.root = StubView("root", host=self)
        self.resources = resources or ResourceStore()

    def add_view(self, view_id: str) -> StubView:
        view = StubView(view_id, host=self)
        self.views[view_id] = view
        return view

    def find_view(self, view_id: str) -> Optional[StubView]:
        return self.views.get(view_id)

    def root_content_view(self) -> StubView:
        return self.root

    def get_string(self, key: int, *args: Any) -> str:
        return self.resources.get_string(key, *args)


class StubMainScreen(StubScreen, CurrentTooltipSlot):
    def __init__(self, **kwargs: Any) -> None:
        super().__init__(ScreenKind.MAIN, **kwargs)


class StubFragment:
    def __init__(self, screen: StubScreen) -> None:
        self._screen = screen

    def require_screen(self) -> StubScreen:
        return self._screen


class RecordingBanner(BannerHandle):
    def __init__(self, container: Any, text: Any, duration: int) -> None:
        self.container = container
        self.text = text
        self.duration = duration
        self.action: Optional[Tuple[str, Callable[[], None]]] = None
        self.action_color: Optional[str] = None
        self.link_handler: Optional[Callable[[str], None]] = None
        self.show_calls = 0
        self.dismissed = False

    def set_action(self, label: str, callback: Callable[[], None]) -> None:
        self.action = (label, callback)

    def set_action_text_color(self, color: str) -> None:
        self.action_color = color

    def set_link_handler(self, handler: Callable[[str], None]) -> None:
        self.link_handler = handler

    def show(self) -> None:
        self.show_calls += 1

    def dismiss(self) -> None:
        self.dismissed = True


class RecordingCaption(CaptionView):
    def __init__(self) -> None:
        self.text: Optional[str] = None
        self.max_lines: Optional[int] = 1

    def set_text(self, text: str) -> None:
        self.text = text

    def set_max_lines(self, lines: Optional[int]) -> None:
        self.max_lines = lines


class RecordingToast(ToastHandle):
    def __init__(self, context: Any, text: str, duration: int) -> None:
        self.context = context
        self.text = text
        self.duration = duration
        self.view: Optional[CaptionView] = None
        self.gravity: Optional[Any] = None
        self.offset: Optional[Tuple[int, int]] = None
        self.show_calls = 0
        self.cancelled = False

    def set_view(self, view: CaptionView) -> None:
        self.view = view

    def set_gravity(self, gravity: Any, x_offset: int, y_offset: int) -> None:
        self.gravity = gravity
        self.offset = (x_offset, y_offset)

    def show(self) -> None:
        self.show_calls += 1

    def cancel(self) -> None:
        self.cancelled = True


class RecordingBalloon(Balloon):
    def __init__(self, context: Any, config: TooltipConfig) -> None:
        self.context = context
        self.config = config
        self.placements: List[Tuple[str, Any, int, int]] = []
        self.dismiss_calls = 0

    def show_align_top(self, anchor: Any, x_offset: int = 0, y_offset: int = 0) -> None:
        self.placements.append(("top", anchor, x_offset, y_offset))

    def show_align_bottom(self, anchor: Any, x_offset: int = 0, y_offset: int = 0) -> None:
        self.placements.append(("bottom", anchor, x_offset, y_offset))

    def dismiss(self) -> None:
        self.dismiss_calls += 1


class RecordingToolkit(FeedbackToolkit):
    """Toolkit double that records every widget it is asked to build."""

    def __init__(self, *, accent: str = "#3366cc", density: float = 2.0, landscape: bool = False) -> None:
        self.accent = accent
        self.density = density
        self.landscape = landscape
        self.banners: List[RecordingBanner] = []
        self.toasts: List[RecordingToast] = []
        self.captions: List[RecordingCaption] = []
        self.inflated: List[Tuple[Any, str]] = []
        self.balloons: List[RecordingBalloon] = []
        self.spotlights: List[Tuple[Any, SpotlightTarget, SpotlightListener]] = []
        self.long_click_handlers: Dict[int, Callable[[Any], bool]] = {}
        self.color_requests: List[Tuple[Any, ThemeAttr]] = []

    def make_banner(self, container: Any, text: Any, duration: int) -> RecordingBanner:
        banner = RecordingBanner(container, text, duration)
        self.banners.append(banner)
        return banner

    def make_toast(self, context: Any, text: str, duration: int) -> RecordingToast:
        toast = RecordingToast(context, text, duration)
        self.toasts.append(toast)
        return toast

    def inflate(self, context: Any, layout: str) -> RecordingCaption:
        self.inflated.append((context, layout))
        caption = RecordingCaption()
        self.captions.append(caption)
        return caption

    def create_balloon(self, context: Any, config: TooltipConfig) -> RecordingBalloon:
        balloon = RecordingBalloon(context, config)
        self.balloons.append(balloon)
        return balloon

    def show_spotlight(self, screen: Any, target: SpotlightTarget, listener: SpotlightListener) -> Any:
        self.spotlights.append((screen, target, listener))
        return target

    def content_description(self, view: Any) -> str:
        return view.description

    def location_on_screen(self, view: Any) -> Tuple[int, int]:
        return view.location

    def host_screen(self, view: Any) -> Optional[Any]:
        return view.host

    def set_on_long_click(self, view: Any, handler: Callable[[Any], bool]) -> None:
        self.long_click_handlers[id(view)] = handler

    def long_press(self, view: Any) -> bool:
        return self.long_click_handlers[id(view)](view)

    def themed_color(self, context: Any, attr: ThemeAttr) -> str:
        self.color_requests.append((context, attr))
        return self.accent

    def dp_to_px(self, dp: float) -> int:
        return int(round(dp * self.density))

    def is_landscape(self, context: Any) -> bool:
        return self.landscape


@pytest.fixture(autouse=True)
def _reset_funnel():
    analytics.reset()
    yield
    analytics.reset()


@pytest.fixture
def toolkit() -> RecordingToolkit:
    return RecordingToolkit()


@pytest.fixture
def main_screen() -> StubMainScreen:
    screen = StubMainScreen()
    screen.add_view("fragment_main_coordinator")
    return screen


@pytest.fixture
def make_screen() -> Callable[..., StubScreen]:
    def _make(kind: ScreenKind = ScreenKind.OTHER, *container_ids: str) -> StubScreen:
        screen = StubMainScreen() if kind is ScreenKind.MAIN else StubScreen(kind)
        for view_id in container_ids:
            screen.add_view(view_id)
        return screen

    return _make


@pytest.fixture
def make_view() -> Callable[..., StubView]:
    return StubView


@pytest.fixture
def make_fragment() -> Callable[[StubScreen], StubFragment]:
    return StubFragment


@pytest.fixture
def opened_urls() -> List[str]:
    return []


@pytest.fixture
def funnel_events() -> List[dict]:
    return []


@pytest.fixture
def funnel(funnel_events) -> SuggestedEditsFunnel:
    return SuggestedEditsFunnel(send_payload_fn=funnel_events.append, session_token="test-session", clock=lambda: 42.0)


@pytest.fixture
def launcher(opened_urls, funnel) -> ExternalUrlLauncher:
    return ExternalUrlLauncher(opener=opened_urls.append, funnel=funnel)

from PySide6.QtWidgets import QLabel, QWidget

from src.ui.components.page_container import PageContainer
from src.ui.pages.page_base import PageBase


class _LabelPage(PageBase):
    def __init__(self, title, order=0):
        super().__init__(title, f"{title} subtitle", title, order=order)
        self.builds = 0
        self.hooks = []

    def build_content(self) -> QWidget:
        self.builds += 1
        page = QWidget()
        QLabel(self.title, page)
        return page

    def on_activated(self):
        super().on_activated()
        self.hooks.append("activated")

    def on_deactivated(self):
        super().on_deactivated()
        self.hooks.append("deactivated")


class _FreshPage(_LabelPage):
    cache_content = False


def test_set_page_shows_content_and_header(qapp):
    container = PageContainer()
    page = _LabelPage("Axes")

    container.set_page(page)

    assert container.current_page is page
    assert container.title_label.text() == "Axes"
    assert container.subtitle_label.text() == "Axes subtitle"
    assert container.content_widget is page.get_content()
    assert container.content_widget.parent() is container.content_area


def test_switching_detaches_previous_content_without_deleting(qapp):
    container = PageContainer()
    first, second = _LabelPage("First"), _LabelPage("Second")
    container.set_page(first)
    old = container.content_widget

    container.set_page(second)

    assert old.parent() is None
    assert old.isHidden()
    assert container.content_widget is second.get_content()
    # Cached content is reused on return.
    container.set_page(first)
    assert container.content_widget is old
    assert first.builds == 1


def test_uncached_page_rebuilds_content(qapp):
    container = PageContainer()
    page = _FreshPage("Fresh")
    container.set_page(page)
    container.set_page(page)
    assert page.builds == 2


def test_set_page_none_clears(qapp):
    container = PageContainer()
    container.set_page(_LabelPage("Axes"))

    container.set_page(None)

    assert container.current_page is None
    assert container.content_widget is None
    assert container.title_label.text() == ""
    assert container.subtitle_label.text() == ""


def test_container_fires_no_lifecycle_hooks(qapp):
    container = PageContainer()
    page = _LabelPage("Axes")
    container.set_page(page)
    container.set_page(None)
    assert page.hooks == []
    assert not page.is_active


def test_refresh_header_without_page_is_noop(qapp):
    container = PageContainer()
    container.refresh_header()
    assert container.title_label.text() == ""

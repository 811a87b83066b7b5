# tests/test_presenter.py
import pytest

from wikisummary.errors import SurfaceNotFound, TargetSurfaceReadOnly
from wikisummary.formatter import Formatter
from wikisummary.presenter import InsertPresenter, NewSurfacePresenter
from wikisummary.surfaces import Surface, SurfaceRegistry
from wikisummary.util import word_at_point

LONG = "Emacs is an extensible, customizable, free text editor. " * 4


def test_reflow_respects_fill_column():
    text = Formatter(fill_column=30).reflow(LONG)
    assert all(len(line) <= 30 for line in text.splitlines())
    assert " ".join(text.split()) == " ".join(LONG.split())


def test_reflow_keeps_paragraphs():
    text = Formatter(70).reflow("One.\nTwo.")
    assert text == "One.\nTwo."


def test_new_surface_is_read_only_and_displayed():
    registry = SurfaceRegistry()
    surface = NewSurfacePresenter(registry, Formatter()).present("Emacs", LONG)
    assert surface.read_only
    assert surface.point == 0
    assert surface.text.startswith("Emacs is an extensible, customizable")
    assert registry.displayed == surface.name


def test_new_surface_names_are_unique():
    registry = SurfaceRegistry()
    presenter = NewSurfacePresenter(registry, Formatter())
    first = presenter.present("Emacs", "Text.")
    second = presenter.present("Emacs", "Text.")
    third = presenter.present("Emacs", "Text.")
    assert len({first.name, second.name, third.name}) == 3
    assert second.name == "*Wikipedia: Emacs*<2>"


def test_insert_at_point():
    registry = SurfaceRegistry()
    registry.add(Surface(name="notes", text="Before  after", point=7))
    surface = InsertPresenter(registry, Formatter(), target="notes").present("X", "inserted")
    assert surface.text == "Before inserted after"
    assert surface.point == 15
    assert registry.displayed == "notes"


def test_insert_into_read_only_leaves_it_untouched():
    registry = SurfaceRegistry()
    registry.add(Surface(name="locked", text="keep me", point=4, read_only=True))
    with pytest.raises(TargetSurfaceReadOnly):
        InsertPresenter(registry, Formatter(), target="locked").present("X", "nope")
    locked = registry.get("locked")
    assert locked.text == "keep me"
    assert locked.point == 4
    assert registry.displayed is None


def test_insert_into_unknown_surface():
    with pytest.raises(SurfaceNotFound):
        InsertPresenter(SurfaceRegistry(), Formatter(), target="ghost").present("X", "y")


@pytest.mark.parametrize(
    "text,point,expected",
    [
        ("look up Emacs now", 10, "Emacs"),
        ("look up Emacs now", 13, "Emacs"),
        ("look up Emacs now", 0, "look"),
        ("   ", 1, None),
        ("", 0, None),
    ],
)
def test_word_at_point(text, point, expected):
    assert word_at_point(text, point) == expected

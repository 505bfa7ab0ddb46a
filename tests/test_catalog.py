import pytest

from librarydesk.book import Book
from librarydesk.catalog import Catalog


@pytest.fixture
def catalog(tmp_path):
    cat = Catalog(tmp_path / "data.txt")
    for book in [
        Book("Moby", "Melville", 1851, 2),
        Book("Dune", "Herbert", 1965, 3),
        Book("Walden", "Thoreau", 1854, 1),
        Book("Emma", "Austen", 1815, 4),
        Book("Persuasion", "Austen", 1817, 0),
    ]:
        cat.insert(book)
    return cat


def test_iteration_is_title_order(catalog):
    titles = [b.title for b in catalog]
    assert titles == sorted(titles)
    assert len(catalog) == 5


def test_search_by_title(catalog):
    result = catalog.search_by_title("Emma")
    assert [b.author for b in result] == ["Austen"]
    assert catalog.search_by_title("Missing") == []


def test_duplicate_titles_are_found(tmp_path):
    cat = Catalog(tmp_path / "d.txt")
    cat.insert(Book("Same", "One", 2000, 1))
    cat.insert(Book("Other", "X", 1999, 1))
    cat.insert(Book("Same", "Two", 2001, 1))
    assert sorted(b.author for b in cat.search_by_title("Same")) == ["One", "Two"]
    found = cat.search_by_all("Same", 2001, "Two")
    assert [b.author for b in found] == ["Two"]


def test_search_by_all_requires_all_fields(catalog):
    assert len(catalog.search_by_all("Dune", 1965, "Herbert")) == 1
    assert catalog.search_by_all("Dune", 1966, "Herbert") == []
    assert catalog.search_by_all("Dune", 1965, "Asimov") == []


def test_search_by_author(catalog):
    result = catalog.search_by_author("Austen")
    assert [b.title for b in result] == ["Emma", "Persuasion"]


def test_search_by_public_year(catalog):
    assert [b.title for b in catalog.search_by_public_year(1854)] == ["Walden"]
    assert catalog.search_by_public_year(2024) == []


def test_empty_catalog_searches(tmp_path):
    cat = Catalog(tmp_path / "x.txt")
    assert cat.search_by_author("Anyone") == []
    assert cat.search_by_public_year(1900) == []
    assert len(cat) == 0


def test_contains(catalog):
    assert Book("Moby", "Melville", 1851, 99) in catalog
    assert Book("Moby", "Someone", 1851, 2) not in catalog
    assert "Moby" not in catalog


def test_clear(catalog):
    catalog.clear()
    assert list(catalog) == []


def test_found_book_is_shared(catalog):
    catalog.search_by_title("Dune")[0].borrow_one()
    assert catalog.search_by_title("Dune")[0].available_copies == 2


def test_save_format(tmp_path):
    path = tmp_path / "data.txt"
    cat = Catalog(path)
    cat.insert(Book("Dune", "Herbert", 1965, 3))
    cat.save()
    assert path.read_text(encoding="utf-8") == "Dune\nHerbert\n1965\n3\n--------\n"


def test_save_load_round_trip(catalog):
    catalog.save()
    loaded = Catalog(catalog.path)
    loaded.load()
    assert list(loaded) == list(catalog)


def test_load_missing_file(tmp_path):
    cat = Catalog(tmp_path / "absent.txt")
    cat.load()
    assert len(cat) == 0


def test_load_stops_at_overlong_line(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(
        "Dune\nHerbert\n1965\n3\n--------\n"
        + "T" * 30
        + "\nA\n1\n1\n--------\n",
        encoding="utf-8",
    )
    cat = Catalog(path)
    cat.load()
    assert [b.title for b in cat] == ["Dune"]


def test_load_incomplete_record_raises(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("Dune\nHerbert\n--------\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Catalog(path).load()


def test_load_bad_number_raises(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("Dune\nHerbert\nyear\n3\n--------\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Catalog(path).load()


def test_load_ignores_trailing_partial_record(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("Dune\nHerbert\n1965\n3\n--------\nEmma\nAusten\n", encoding="utf-8")
    cat = Catalog(path)
    cat.load()
    assert [b.title for b in cat] == ["Dune"]


def test_load_many_sorted_keeps_order(tmp_path):
    path = tmp_path / "data.txt"
    source = Catalog(path)
    titles = [f"Book{i:03d}" for i in range(50)]
    for title in titles:
        source.insert(Book(title, "Anon", 2000, 1))
    source.save()
    loaded = Catalog(path)
    loaded.load()
    assert [b.title for b in loaded] == titles
    assert all(loaded.search_by_all(t, 2000, "Anon") for t in titles)
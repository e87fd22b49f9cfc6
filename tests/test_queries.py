from datetime import datetime, timedelta, timezone

from app.crud import mutations, queries
from app.models import Alternative, Category, Image, Tool


def _tool(db, slug, **values):
    values.setdefault("name", slug.title())
    values.setdefault("website_url", f"https://{slug}.dev")
    return mutations.insert(db, Tool, {"slug": slug, **values})


def test_insert_assigns_unique_ids_and_timestamps(db):
    first = mutations.insert(db, Category, {"name": "UI", "slug": "ui"})
    second = mutations.insert(db, Category, {"name": "State", "slug": "state"})

    assert first.id and second.id
    assert first.id != second.id
    assert first.created_at is not None
    assert first.updated_at is not None


def test_find_by_id_returns_inserted_payload(db):
    created = mutations.insert(db, Category, {"name": "UI", "slug": "ui", "label": "User interface"})

    found = queries.find_by_id(db, Category, created.id)
    assert found.name == "UI"
    assert found.slug == "ui"
    assert found.label == "User interface"


def test_find_by_id_and_slug_miss(db):
    assert queries.find_by_id(db, Tool, "missing") is None
    assert queries.find_by_slug(db, Tool, "missing") is None


def test_find_many_pages_newest_first(db):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for i in range(5):
        _tool(db, f"tool-{i}", created_at=base + timedelta(days=i))

    page = queries.find_many(db, Tool, page=1, limit=2)
    assert [t.slug for t in page["data"]] == ["tool-4", "tool-3"]
    assert page["total"] == 5
    assert page["page"] == 1
    assert page["page_size"] == 2

    last = queries.find_many(db, Tool, page=3, limit=2)
    assert [t.slug for t in last["data"]] == ["tool-0"]


def test_out_of_range_page_is_empty_with_total(db):
    _tool(db, "pinia")
    page = queries.find_many(db, Tool, page=10, limit=20)
    assert page["data"] == []
    assert page["total"] == 1


def test_search_is_case_insensitive_and_total_stays_unfiltered(db):
    _tool(db, "pinia", description="Intuitive STATE management")
    _tool(db, "vuetify", description="Material components")
    _tool(db, "statekit", name="StateKit")

    page = queries.find_many(db, Tool, q="state")
    assert {t.slug for t in page["data"]} == {"pinia", "statekit"}
    assert page["total"] == 3


def test_search_columns_per_resource(db):
    mutations.insert(db, Category, {"name": "Forms", "slug": "forms", "label": "Validation helpers"})
    mutations.insert(db, Category, {"name": "Charts", "slug": "charts"})
    assert [c.slug for c in queries.find_many(db, Category, q="validation")["data"]] == ["forms"]

    mutations.insert(db, Image, {"url": "https://cdn.test/1.png", "original_name": "vue-logo.png", "filename": "1.png"})
    mutations.insert(db, Image, {"url": "https://cdn.test/2.png", "original_name": "react.png", "filename": "2.png"})
    assert [i.url for i in queries.find_many(db, Image, q="LOGO")["data"]] == ["https://cdn.test/1.png"]

    mutations.insert(db, Alternative, {"name": "Redux", "slug": "redux", "website_url": "https://redux.js.org"})
    assert queries.find_many(db, Alternative, q="mobx")["data"] == []


def test_tools_for_alternative(db):
    alternative = mutations.insert(db, Alternative, {"name": "Redux", "slug": "redux", "website_url": "https://redux.js.org"})
    pinia = _tool(db, "pinia")
    _tool(db, "vuetify")
    mutations.link_tool_to_alternative(db, pinia.id, alternative.id)

    assert [t.slug for t in queries.find_tools_for_alternative(db, alternative.id)] == ["pinia"]


def test_sitemap_tools_lists_every_tool(db):
    _tool(db, "pinia")
    _tool(db, "vuetify")
    assert {t.slug for t in queries.find_sitemap_tools(db)} == {"pinia", "vuetify"}

from app.core.config import settings
from tests.conftest import make_menu_item


def names(resp):
    return [i["name"]["en"] for i in resp.json()]


async def test_search_with_price_range(client, db):
    await make_menu_item(db, price=15)
    await make_menu_item(db, name={"en": "Coffee Cake", "ar": "كيكة القهوة"}, price=12, tags=[])
    await make_menu_item(db, name={"en": "Coffee Beans 1kg", "ar": "حبوب قهوة"}, price=90)
    await make_menu_item(db, name={"en": "Old Coffee", "ar": "قهوة قديمة"}, price=14, is_available=False)
    await make_menu_item(db, name={"en": "Orange Juice", "ar": "عصير برتقال"}, price=11, tags=["fresh"])

    resp = await client.get("/api/search", params={"q": "coffee", "minPrice": 10, "maxPrice": 20})

    assert resp.status_code == 200
    # Latte matches through its "coffee" tag
    assert sorted(names(resp)) == ["Coffee Cake", "Latte"]


async def test_search_matches_tags_one_at_a_time(client, db):
    await make_menu_item(db, tags=["coffee", "classic"])
    await make_menu_item(db, name={"en": "Water", "ar": "ماء"}, tags=[])

    # punctuation of the stored list is not tag text
    for term in ['", "', "[", '"coffee"', "coffee, classic"]:
        resp = await client.get("/api/search", params={"q": term})
        assert names(resp) == [], term

    assert names(await client.get("/api/search", params={"q": "CLASS"})) == ["Latte"]


async def test_suggestions_ignore_list_punctuation(client, db):
    await make_menu_item(db, tags=["coffee", "classic"])

    assert (await client.get("/api/search/suggestions", params={"q": '",'})).json() == []
    assert (await client.get("/api/search/suggestions", params={"q": '["'})).json() == []


async def test_advanced_tag_and_allergen_filters_match_whole_elements(client, db):
    await make_menu_item(db, tags=["coffee", "classic"])

    for params in ({"tags": '"coffee"'}, {"tags": "coff"}, {"allergens": '["'}, {"allergens": '", "'}):
        resp = await client.get("/api/search/advanced", params=params)
        assert names(resp) == [], params

    assert names(await client.get("/api/search/advanced", params={"tags": "classic"})) == ["Latte"]
    assert names(await client.get("/api/search/advanced", params={"allergens": "DAIRY"})) == ["Latte"]


async def test_search_matches_arabic_text(client, db):
    await make_menu_item(db)
    await make_menu_item(db, name={"en": "Mint Tea", "ar": "شاي بالنعناع"}, tags=["tea"])

    resp = await client.get("/api/search", params={"q": "نعناع"})
    assert names(resp) == ["Mint Tea"]


async def test_search_puts_featured_first(client, db):
    await make_menu_item(db, name={"en": "Plain", "ar": "عادي"})
    await make_menu_item(db, name={"en": "Star", "ar": "نجمة"}, is_featured=True)

    resp = await client.get("/api/search", params={"q": "coffee"})
    assert names(resp) == ["Star", "Plain"]


async def test_basic_search_ignores_advanced_filters(client, db):
    await make_menu_item(db)

    resp = await client.get("/api/search", params={"q": "latte", "isDiscounted": "true", "tags": "tea"})
    assert names(resp) == ["Latte"]


async def test_search_result_cap(client, db, monkeypatch):
    monkeypatch.setattr(settings, "search_limit", 2)
    monkeypatch.setattr(settings, "advanced_search_limit", 3)
    for i in range(5):
        await make_menu_item(db, name={"en": f"Coffee {i}", "ar": f"قهوة {i}"})

    assert len((await client.get("/api/search", params={"q": "coffee"})).json()) == 2
    assert len((await client.get("/api/search/advanced", params={"q": "coffee"})).json()) == 3


async def test_advanced_search_filters(client, db):
    await make_menu_item(db, name={"en": "Deal", "ar": "عرض"}, is_discounted=True, discount_percentage=20)
    await make_menu_item(
        db,
        name={"en": "Vegan Deal", "ar": "عرض نباتي"},
        is_discounted=True,
        discount_percentage=40,
        allergens={"en": [], "ar": []},
        tags=["vegan"],
    )
    await make_menu_item(db, name={"en": "Full price", "ar": "سعر كامل"})

    discounted = await client.get("/api/search/advanced", params={"isDiscounted": "true"})
    # best discount first
    assert names(discounted) == ["Vegan Deal", "Deal"]

    # anything but "true" leaves the filter off
    loose = await client.get("/api/search/advanced", params={"isDiscounted": "yes"})
    assert len(loose.json()) == 3

    tagged = await client.get("/api/search/advanced", params={"tags": "vegan,organic"})
    assert names(tagged) == ["Vegan Deal"]

    dairy = await client.get("/api/search/advanced", params={"allergens": "dairy", "q": "deal"})
    assert names(dairy) == ["Deal"]


async def test_advanced_search_category_by_language(client, db):
    await make_menu_item(db)
    await make_menu_item(
        db, name={"en": "Croissant", "ar": "كرواسون"}, category={"en": "Bakery", "ar": "مخبوزات"}
    )

    resp = await client.get("/api/search/advanced", params={"category": "مخبوزات", "language": "ar"})
    assert names(resp) == ["Croissant"]


async def test_suggestions(client, db):
    await make_menu_item(db)
    await make_menu_item(db, name={"en": "Latte", "ar": "لاتيه"}, price=18)
    await make_menu_item(db, name={"en": "Iced Latte", "ar": "لاتيه مثلج"}, tags=["cold"])
    await make_menu_item(db, name={"en": "Lavender Latte", "ar": "لاتيه لافندر"}, is_available=False)

    resp = await client.get("/api/search/suggestions", params={"q": "lat"})

    assert resp.status_code == 200
    assert sorted(resp.json()) == ["Iced Latte", "Latte"]


async def test_suggestions_in_arabic_and_by_tag(client, db):
    await make_menu_item(db, name={"en": "Cold Brew", "ar": "كولد برو"}, tags=["iced"])

    assert (await client.get("/api/search/suggestions", params={"q": "كولد", "language": "ar"})).json() == ["كولد برو"]
    assert (await client.get("/api/search/suggestions", params={"q": "iced"})).json() == ["Cold Brew"]


async def test_short_suggestion_term_returns_nothing(client, db):
    await make_menu_item(db)

    assert (await client.get("/api/search/suggestions", params={"q": "l"})).json() == []
    assert (await client.get("/api/search/suggestions")).json() == []

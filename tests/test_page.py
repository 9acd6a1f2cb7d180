from lwcsearch import InputField, StaticPage, init_url_search


def _page(url):
    box = InputField("searchInput")
    events = []
    box.add_listener("input", lambda ev: events.append(("field", ev.target.value, ev.bubbles)))
    page = StaticPage(url, [box])
    page.add_listener("input", lambda ev: events.append(("page", ev.target.value)))
    return page, box, events


def test_prefills_field_and_notifies():
    page, box, events = _page("https://lwc.guide/articles/wire.html?q=wire+adapters")
    init_url_search(page)
    assert box.value == "wire adapters"
    assert events == [("field", "wire adapters", True), ("page", "wire adapters")]


def test_no_param_does_nothing():
    page, box, events = _page("https://lwc.guide/index.html?tag=lwc")
    box.value = "typed"
    init_url_search(page)
    assert box.value == "typed"
    assert events == []


def test_empty_param_does_nothing():
    page, box, events = _page("https://lwc.guide/?q=")
    init_url_search(page)
    assert box.value == ""
    assert events == []


def test_missing_field_is_ignored():
    page = StaticPage("https://lwc.guide/?q=lwc")
    init_url_search(page)
    assert page.find_field("searchInput") is None


def test_first_value_wins_and_custom_names():
    box = InputField("box")
    page = StaticPage("/?s=one&s=two", [box])
    init_url_search(page, param="s", field_id="box")
    assert box.value == "one"


def test_query_param_decoding():
    page = StaticPage("/search?q=%40wire%20%26%20lds")
    assert page.query_param("q") == "@wire & lds"
    assert page.query_param("missing") is None

import pytest

from jsonhome.errors import IncompatibleLinksError, InvalidLinkError
from jsonhome.models.hints import Allow, Hints
from jsonhome.models.links import DirectLink, HrefVar, direct_link, resource_link_from_json, templated_link

REL_STOREFRONT = "http://example.org/rel/shop/storefront"
STOREFRONT_HREF = "http://example.org/shop/storefront"


def _storefront(href: str = STOREFRONT_HREF, allows=(Allow.GET,), representations=("text/html",)) -> DirectLink:
    return direct_link(REL_STOREFRONT, href, allows, representations)


def test_to_json_renders_href_and_hints():
    assert _storefront().to_json() == {
        "href": STOREFRONT_HREF,
        "hints": {"allow": ["GET"], "representations": ["text/html"]},
    }


def test_construction_fails_for_template_syntax_in_href():
    with pytest.raises(InvalidLinkError):
        _storefront(href="/shop/{id}")


def test_construction_fails_for_empty_href():
    with pytest.raises(InvalidLinkError):
        _storefront(href="")


def test_merge_fails_for_different_href():
    with pytest.raises(IncompatibleLinksError) as exc_info:
        _storefront().merge_with(_storefront(href="http://example.org/shop/other"))
    assert "different hrefs" in str(exc_info.value)


def test_merge_fails_for_templated_link():
    other = templated_link(
        REL_STOREFRONT,
        "/shop/{id}",
        [HrefVar(name="id", var_type="http://example.org/vartype/id")],
        Hints(allows=[Allow.GET]),
    )
    with pytest.raises(IncompatibleLinksError):
        _storefront().merge_with(other)


def test_merge_fails_for_different_relation_type():
    other = direct_link("http://example.org/rel/other", STOREFRONT_HREF, [Allow.GET], ["text/html"])
    with pytest.raises(IncompatibleLinksError):
        _storefront().merge_with(other)


def test_merge_combines_hints():
    merged = _storefront().merge_with(_storefront(allows=[Allow.POST], representations=["application/json"]))
    assert merged.href == STOREFRONT_HREF
    assert merged.hints.allows == {Allow.GET, Allow.POST}
    assert merged.hints.representations == ("text/html", "application/json")


def test_merge_with_self_returns_equal_link():
    link = _storefront()
    assert link.merge_with(link) == link


def test_resource_link_from_json_parses_direct_and_templated_entries():
    direct = resource_link_from_json(REL_STOREFRONT, _storefront().to_json())
    assert direct == _storefront()

    templated = resource_link_from_json(
        "http://example.org/rel/page",
        {
            "href-template": "/pages/{pageId}",
            "href-vars": {"pageId": "http://example.org/vartype/pageId"},
            "hints": {"allow": ["GET"], "representations": ["text/html"]},
        },
    )
    assert templated.href_vars == (HrefVar(name="pageId", var_type="http://example.org/vartype/pageId"),)


def test_resource_link_from_json_requires_exactly_one_address():
    with pytest.raises(InvalidLinkError):
        resource_link_from_json(REL_STOREFRONT, {"hints": {}})
    with pytest.raises(InvalidLinkError):
        resource_link_from_json(
            REL_STOREFRONT,
            {"href": "/a", "href-template": "/a/{x}", "href-vars": {"x": "http://example.org/x"}},
        )


def test_resource_link_from_json_requires_href_vars_object():
    with pytest.raises(InvalidLinkError):
        resource_link_from_json(
            REL_STOREFRONT,
            {"href-template": "/a/{x}", "href-vars": ["x"]},
        )


def test_resource_link_from_json_requires_hints_object():
    with pytest.raises(InvalidLinkError):
        resource_link_from_json(REL_STOREFRONT, {"href": "/a", "hints": ["GET"]})

from jsonhome.config import GeneratorConfig
from jsonhome.generator.hints import allowed_methods_of, hints_of, supported_representations_of
from jsonhome.generator.routes import RouteDescriptor
from jsonhome.models.hints import Allow


def _route(**kwargs) -> RouteDescriptor:
    return RouteDescriptor(relation_type="http://example.org/rel/r", paths=("/r",), **kwargs)


def test_unspecified_methods_default_to_get():
    assert allowed_methods_of(_route()) == {Allow.GET}


def test_declared_methods_are_kept():
    assert allowed_methods_of(_route(methods=["PUT", "DELETE"])) == {Allow.PUT, Allow.DELETE}


def test_default_representation_is_text_html():
    assert supported_representations_of(_route()) == ("text/html",)


def test_default_representation_comes_from_config():
    config = GeneratorConfig(default_representation="application/hal+json")
    assert supported_representations_of(_route(), config) == ("application/hal+json",)


def test_post_without_consumes_defaults_to_form_encoding():
    assert supported_representations_of(_route(methods=["POST"])) == ("application/x-www-form-urlencoded",)


def test_post_with_produces_appends_form_encoding():
    route = _route(methods=["POST"], produces=["application/json"])
    assert supported_representations_of(route) == ("application/json", "application/x-www-form-urlencoded")


def test_post_with_other_methods_does_not_default_to_form_encoding():
    assert supported_representations_of(_route(methods=["POST", "GET"])) == ("text/html",)


def test_produces_then_novel_consumes_in_declaration_order():
    route = _route(
        methods=["GET", "PUT"],
        produces=["text/html", "application/json"],
        consumes=["application/json", "application/foo"],
    )
    assert supported_representations_of(route) == ("text/html", "application/json", "application/foo")


def test_get_route_hints_go_to_representations():
    h = hints_of(_route(produces=["application/json"]))
    assert h.allows == {Allow.GET}
    assert h.representations == ("application/json",)
    assert h.accept_put == ()
    assert h.accept_post == ()


def test_head_route_hints_go_to_representations():
    assert hints_of(_route(methods=["HEAD"])).representations == ("text/html",)


def test_put_route_hints_go_to_accept_put():
    h = hints_of(_route(methods=["PUT"], consumes=["application/json"]))
    assert h.accept_put == ("application/json",)
    assert h.representations == ()


def test_post_route_hints_go_to_accept_post():
    h = hints_of(_route(methods=["POST"]))
    assert h.accept_post == ("application/x-www-form-urlencoded",)
    assert h.representations == ()


def test_patch_route_hints_are_treated_like_put():
    h = hints_of(_route(methods=["PATCH"], consumes=["application/merge-patch+json"]))
    assert h.allows == {Allow.PATCH}
    assert h.accept_put == ("application/merge-patch+json",)


def test_delete_only_route_has_no_representation_lists():
    h = hints_of(_route(methods=["DELETE"]))
    assert h.to_json() == {"allow": ["DELETE"], "representations": []}
